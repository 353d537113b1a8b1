"""Gym Manager: accounts, memberships and workout classes for a small gym."""
