"""
Persistence adapters.

Services depend on the repository instead of opening database sessions.
"""
