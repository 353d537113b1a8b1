from __future__ import annotations

import bcrypt

from gym.core.security import hash_password, needs_rehash, verify_password


def test_hash_is_salted_and_prefixed():
    first = hash_password("pw1")
    second = hash_password("pw1")

    assert first.startswith("argon2$")
    assert first != second
    assert "pw1" not in first


def test_verify_accepts_only_the_right_password():
    stored = hash_password("pw1")

    assert verify_password("pw1", stored) is True
    assert verify_password("wrong", stored) is False


def test_verify_legacy_bcrypt_hash():
    legacy = bcrypt.hashpw(b"old-secret", bcrypt.gensalt(rounds=4)).decode("utf-8")

    assert verify_password("old-secret", legacy) is True
    assert verify_password("other", legacy) is False
    assert needs_rehash(legacy) is True


def test_unknown_or_missing_hash_never_verifies():
    assert verify_password("pw1", None) is False
    assert verify_password("pw1", "") is False
    assert verify_password("pw1", "plaintext-pw1") is False
    assert verify_password("pw1", "argon2$not-a-hash") is False


def test_fresh_hash_does_not_need_rehash():
    assert needs_rehash(hash_password("pw1")) is False
