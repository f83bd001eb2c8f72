"""Tests for BcryptSecretHasher."""

import pytest

from otaku_store.infrastructure.bcrypt_secret_hasher import BcryptSecretHasher


@pytest.fixture
def hasher():
    """Create a fast hasher for tests."""
    return BcryptSecretHasher(rounds=4)


def test_hash_is_not_cleartext(hasher):
    hashed = hasher.hash("demo123")

    assert hashed != "demo123"
    assert "demo123" not in hashed
    assert hashed.startswith("$2b$04$")


def test_hash_is_salted(hasher):
    """Test that hashing the same secret twice gives different hashes."""
    assert hasher.hash("demo123") != hasher.hash("demo123")


def test_verify_correct_secret(hasher):
    assert hasher.verify("demo123", hasher.hash("demo123")) is True


def test_verify_wrong_secret(hasher):
    assert hasher.verify("demo124", hasher.hash("demo123")) is False


def test_verify_malformed_hash(hasher):
    """Test that a garbage stored hash never verifies."""
    assert hasher.verify("demo123", "not-a-bcrypt-hash") is False


def test_long_secret(hasher):
    secret = "x" * 100
    assert hasher.verify(secret, hasher.hash(secret)) is True


@pytest.mark.parametrize("rounds", [3, 32])
def test_invalid_rounds(rounds):
    with pytest.raises(ValueError, match="bcrypt rounds"):
        BcryptSecretHasher(rounds=rounds)
