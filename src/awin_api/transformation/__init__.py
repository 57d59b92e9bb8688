"""
Transformation Layer - Pure, Deterministic Functions

Flattens API records into tabular form.
- Pure functions (input → output)
- No I/O operations
"""
