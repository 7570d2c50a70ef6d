"""
JWT Token Issuer - Implements TokenIssuerPort with signed JWTs.
"""

import jwt
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
from taskboard_auth.domain.token import SessionToken
from taskboard_auth.errors import InvalidToken, SigningMisconfigured
from taskboard_auth.ports.token_port import TokenIssuerPort


DEFAULT_TTL_SECONDS = 3600


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JWTTokenIssuer(TokenIssuerPort):
    """
    JWT-based token issuer.

    Uses PyJWT for signing and verification. Tokens carry the account ID
    in `sub` and an `exp` claim, so verification needs no store lookup.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        issuer: str = "taskboard-auth",
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize JWT issuer.

        Args:
            secret: Signing secret (must be non-empty)
            algorithm: JWT algorithm (default HS256)
            issuer: Token issuer claim
            ttl_seconds: Token lifetime in seconds (default 1 hour)
            clock: Returns the issuance time (defaults to UTC now)

        Raises:
            SigningMisconfigured: If secret is absent or blank
        """
        if not secret or not secret.strip():
            raise SigningMisconfigured("JWT signing secret is not configured")

        self._secret = secret
        self._algorithm = algorithm
        self._issuer = issuer
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock or _utcnow

    def issue(self, subject: str) -> SessionToken:
        """
        Issue a JWT for an account.

        Args:
            subject: Account ID

        Returns:
            Session token expiring ttl_seconds after issuance
        """
        # JWT timestamps have whole-second resolution
        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + self._ttl
        payload = {
            "sub": subject,
            "iat": issued_at,
            "exp": expires_at,
            "iss": self._issuer,
        }

        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return SessionToken(
            token=token,
            subject=subject,
            issued_at=issued_at,
            expires_at=expires_at,
        )

    def verify(self, token: str) -> SessionToken:
        """
        Verify a JWT and return its claims.

        Args:
            token: JWT string

        Returns:
            Decoded session token

        Raises:
            InvalidToken: On bad signature, expiry or missing claims
        """
        if not token:
            raise InvalidToken("Empty token")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                options={"require": ["sub", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidToken("Token expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidToken(f"Token rejected: {e}") from e

        return SessionToken(
            token=token,
            subject=payload["sub"],
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
