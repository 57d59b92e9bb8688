"""
Extract Layer - Awin Publisher API

This layer handles all calls to the Awin API.
- Authenticated, throttled GET requests
- Schema-validated records for transactions and commission groups
- Commission-group lookup cache used to enrich transaction parts
"""
