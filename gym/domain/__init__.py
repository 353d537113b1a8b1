"""Domain records, roles and membership plans."""
