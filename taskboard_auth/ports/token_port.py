"""
Token Issuer Port - Interface for session token issuance.

Implementations:
- JWTTokenIssuer: HS256 JWT tokens
"""

from abc import ABC, abstractmethod
from taskboard_auth.domain.token import SessionToken


class TokenIssuerPort(ABC):
    """Port: Issue and verify stateless bearer tokens."""

    @abstractmethod
    def issue(self, subject: str) -> SessionToken:
        """
        Issue a signed token for an account.

        Args:
            subject: Account ID the token grants access for

        Returns:
            Session token with its expiry
        """
        pass

    @abstractmethod
    def verify(self, token: str) -> SessionToken:
        """
        Verify a token's signature and expiry without touching the store.

        Args:
            token: Bearer token string

        Returns:
            Decoded session token

        Raises:
            InvalidToken: If the token is malformed, tampered with or expired
        """
        pass
