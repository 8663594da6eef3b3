"""
Shared utilities: structured logging and password hashing.
"""
