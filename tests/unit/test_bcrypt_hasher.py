"""
Unit tests for bcrypt password hasher.
"""

from taskboard_auth.adapters.bcrypt_hasher import BcryptPasswordHasher, DEFAULT_ROUNDS


def test_default_cost():
    """Test the default work factor."""
    assert DEFAULT_ROUNDS == 10


def test_cost_is_recorded_in_hash():
    """Test the configured work factor ends up in the stored hash."""
    hashed = BcryptPasswordHasher(rounds=4).hash("pw")
    assert hashed.split("$")[2] == "04"


def test_hash_is_not_plaintext():
    """Test the stored credential never equals the password."""
    hasher = BcryptPasswordHasher(rounds=4)

    hashed = hasher.hash("secret1")

    assert hashed != "secret1"
    assert "secret1" not in hashed
    assert hashed.startswith("$2")


def test_same_password_hashes_differently():
    """Test that each hash uses a fresh salt."""
    hasher = BcryptPasswordHasher(rounds=4)

    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first != second
    assert hasher.verify("secret1", first)
    assert hasher.verify("secret1", second)


def test_verify_wrong_password():
    """Test mismatch detection."""
    hasher = BcryptPasswordHasher(rounds=4)
    hashed = hasher.hash("secret1")

    assert not hasher.verify("wrong", hashed)
    assert not hasher.verify("", hashed)


def test_verify_malformed_hash():
    """Test that a corrupt stored hash verifies as False instead of raising."""
    hasher = BcryptPasswordHasher(rounds=4)

    assert hasher.verify("secret1", "not-a-bcrypt-hash") is False
    assert hasher.verify("secret1", "") is False


def test_long_password():
    """Test passwords beyond bcrypt's 72-byte input limit."""
    hasher = BcryptPasswordHasher(rounds=4)
    password = "x" * 100

    hashed = hasher.hash(password)

    assert hasher.verify(password, hashed)


def test_burn_always_false():
    """Test the dummy verification used for unknown accounts."""
    hasher = BcryptPasswordHasher(rounds=4)

    assert hasher.burn("taskboard-auth-dummy-password") is False
    assert hasher.burn("anything") is False
