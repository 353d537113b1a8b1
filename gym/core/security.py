"""Security helpers (hashing and verification)."""

from __future__ import annotations

import bcrypt
from argon2 import PasswordHasher, exceptions as argon_exc

_ph = PasswordHasher()
_PREFIX = "argon2$"
_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def hash_password(password: str) -> str:
    """Create a modern Argon2 hash with a prefix for detection."""
    hashed = _ph.hash(password)
    return f"{_PREFIX}{hashed}"


def _bcrypt_secret(password: str) -> bytes:
    # bcrypt only uses the first 72 bytes
    return password.encode("utf-8")[:72]


def verify_password(password: str, stored_hash: str | None) -> bool:
    stored = stored_hash or ""
    if stored.startswith(_PREFIX):
        hashed = stored[len(_PREFIX) :]
        try:
            return _ph.verify(hashed, password)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False
    if stored.startswith(_BCRYPT_PREFIXES):
        # Hashes written by the first version of the gym system (jBCrypt, $2a$).
        try:
            return bcrypt.checkpw(_bcrypt_secret(password), stored.encode("utf-8"))
        except ValueError:
            return False
    return False


def needs_rehash(stored_hash: str | None) -> bool:
    """Return True when the stored hash is legacy or uses outdated Argon2 parameters."""
    stored = stored_hash or ""
    if not stored.startswith(_PREFIX):
        return True
    return _ph.check_needs_rehash(stored[len(_PREFIX) :])


# Verified against when the username is unknown so both login failures cost the same.
DUMMY_HASH = hash_password("gym-dummy-password")
