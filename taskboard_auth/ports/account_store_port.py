"""
Account Store Port - Interface for durable account storage.

Implementations:
- MemoryAccountStore: In-memory dict (testing only)
- RedisAccountStore: Redis-backed accounts
- DynamoDBAccountStore: DynamoDB accounts
"""

from abc import ABC, abstractmethod
from typing import Optional
from taskboard_auth.domain.account import Account


class AccountStorePort(ABC):
    """Port: Look up and create accounts."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Account]:
        """
        Find an account by email.

        Args:
            email: Normalised email address

        Returns:
            Account if found, None if no account has this email

        Raises:
            StoreUnavailable: If the backend cannot be reached. A lookup
                failure is never reported as None.
        """
        pass

    @abstractmethod
    def create(self, username: str, email: str, password_hash: str) -> Account:
        """
        Create and persist a new account.

        The insert must be atomic insert-if-absent on email: of two
        concurrent creates for the same email, exactly one succeeds.

        Args:
            username: Display name
            email: Normalised email address
            password_hash: Hashed password credential (never plaintext)

        Returns:
            Created account

        Raises:
            DuplicateEmail: If an account with this email already exists
            StoreUnavailable: If the backend cannot be reached
        """
        pass
