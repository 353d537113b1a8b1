"""Business-rule exceptions raised by the gym services."""

from __future__ import annotations


class GymError(Exception):
    """Base class for every error the services raise on purpose."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(GymError):
    pass


class DuplicateUsernameError(GymError):
    pass


class InvalidCredentialsError(GymError):
    pass


class InvalidRoleError(GymError):
    pass


class ValidationError(GymError):
    """Input that violates a record invariant (negative cost, unknown plan)."""


class UnauthorizedError(GymError):
    """Caller lacks the role or does not own the record."""


class ForbiddenError(UnauthorizedError):
    """Operation is never allowed on this record, whoever asks."""


class StorageError(GymError):
    """Opaque failure reported by the persistence layer."""
