"""
Password Hasher Port - Interface for one-way password hashing.

Implementations:
- BcryptPasswordHasher: bcrypt with a per-hash random salt
"""

from abc import ABC, abstractmethod


class PasswordHasherPort(ABC):
    """Port: Hash passwords and check them against stored hashes."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Hash a password with a freshly generated salt.

        Args:
            password: Plaintext password

        Returns:
            Encoded hash (salt and cost included)
        """
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a password against a stored hash in constant time.

        Args:
            password: Plaintext password
            password_hash: Stored hash

        Returns:
            True if they match, False otherwise (including malformed hashes)
        """
        pass

    def burn(self, password: str) -> bool:
        """
        Spend the cost of one verification when no account exists.

        Adapters override this to verify against a throwaway hash, so an
        unknown email takes as long as a wrong password. Always returns False.
        """
        return False
