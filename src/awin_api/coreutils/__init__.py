"""
Core Utilities - HTTP session, throttling, environment, logging and time helpers
"""
