"""
Bcrypt Password Hasher - Implements PasswordHasherPort with bcrypt.
"""

import bcrypt
from taskboard_auth.ports.hasher_port import PasswordHasherPort


DEFAULT_ROUNDS = 10

# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


class BcryptPasswordHasher(PasswordHasherPort):
    """
    bcrypt-based password hasher.

    Every hash gets its own random salt from bcrypt.gensalt(), so two
    accounts with the same password store different hashes.
    bcrypt.checkpw compares in constant time.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """
        Initialize hasher.

        Args:
            rounds: bcrypt cost factor (log2 of the iteration count)
        """
        self._rounds = rounds
        self._dummy_hash = self.hash("taskboard-auth-dummy-password")

    def hash(self, password: str) -> str:
        """Hash a password with bcrypt (fresh salt each call)."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            return False

    def burn(self, password: str) -> bool:
        """Verify against the dummy hash to equalise timing of misses."""
        self.verify(password, self._dummy_hash)
        return False
