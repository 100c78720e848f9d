"""Unit tests for PasswordHasher."""

from security import PasswordHasher


class TestPasswordHasher:
    """Test cases for bcrypt hashing and verification."""

    def test_hash_is_salted_and_not_plaintext(self):
        """Two hashes of the same password differ and never contain it."""
        hasher = PasswordHasher(rounds=4)

        first = hasher.hash("secret")
        second = hasher.hash("secret")

        assert first != second
        assert "secret" not in first
        assert first.startswith("$2b$04$")

    def test_default_cost_factor(self):
        """Default cost factor is 10."""
        hasher = PasswordHasher()

        assert hasher.hash("secret").startswith("$2b$10$")

    def test_verify(self):
        """Correct password verifies, wrong one does not."""
        hasher = PasswordHasher(rounds=4)
        password_hash = hasher.hash("correct")

        assert hasher.verify("correct", password_hash) is True
        assert hasher.verify("wrong", password_hash) is False

    def test_verify_corrupted_hash(self):
        """A malformed stored hash is a failed verification, not a crash."""
        hasher = PasswordHasher(rounds=4)

        assert hasher.verify("correct", "not-a-bcrypt-hash") is False

    def test_long_password_truncated_consistently(self):
        """Passwords longer than 72 bytes hash and verify on their first 72 bytes."""
        hasher = PasswordHasher(rounds=4)
        password = "x" * 100
        password_hash = hasher.hash(password)

        assert hasher.verify(password, password_hash) is True
        assert hasher.verify("x" * 72, password_hash) is True

    def test_verify_dummy_always_fails(self):
        """The dummy check never authenticates anybody."""
        hasher = PasswordHasher(rounds=4)

        assert hasher.verify_dummy("dummy-password") is False
