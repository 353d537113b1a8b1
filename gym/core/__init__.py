"""
Core utilities shared across the gym package.

This package hosts configuration helpers (env vars), password hashing and the
logging setup used by the CLI and scripts. Services depend on these primitives
instead of reading os.environ or touching hashing libraries directly.
"""
