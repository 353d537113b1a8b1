"""
High-level use cases for the gym.

Each service module orchestrates the repository to implement business rules
(register, purchase a membership, edit a class). The CLI calls the session
service instead of touching the repository or the database directly.
"""
