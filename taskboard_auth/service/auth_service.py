"""
Auth Service - Registration and login against an account store.

Owns password hashing, credential comparison and token issuance.
"""

import logging
from typing import Optional
from taskboard_auth.config import AuthConfig
from taskboard_auth.domain.account import Account, normalize_email
from taskboard_auth.domain.token import SessionToken
from taskboard_auth.errors import (
    AccountExists,
    DuplicateEmail,
    InvalidCredentials,
    StoreUnavailable,
)
from taskboard_auth.ports.account_store_port import AccountStorePort
from taskboard_auth.ports.hasher_port import PasswordHasherPort
from taskboard_auth.ports.token_port import TokenIssuerPort

logger = logging.getLogger(__name__)


def build_account_store(config: AuthConfig) -> AccountStorePort:
    """Build the account store selected by config.store_backend."""
    from taskboard_auth.adapters import (
        DynamoDBAccountStore,
        MemoryAccountStore,
        RedisAccountStore,
    )

    backend = config.store_backend.lower()
    if backend == "memory":
        return MemoryAccountStore()
    if backend == "redis":
        return RedisAccountStore(redis_url=config.redis_url)
    if backend == "dynamodb":
        return DynamoDBAccountStore(
            table_name=config.dynamodb_table,
            region_name=config.aws_region,
        )
    raise ValueError(f"Unknown store backend: {config.store_backend}")


class AuthService:
    """
    Registration and login.

    Example:
        from taskboard_auth import AuthService, AuthConfig
        from taskboard_auth.adapters import MemoryAccountStore

        service = AuthService.from_config(
            AuthConfig(jwt_secret="secret"),
            store=MemoryAccountStore(),
        )

        service.register("ann", "a@x.com", "secret1")
        session = service.login("a@x.com", "secret1")
        service.verify(session.token)

    The service holds no mutable state; one instance serves all requests.
    """

    def __init__(
        self,
        store: AccountStorePort,
        hasher: PasswordHasherPort,
        tokens: TokenIssuerPort,
    ):
        """
        Initialize auth service with adapters.

        Args:
            store: Account store adapter
            hasher: Password hasher adapter
            tokens: Token issuer adapter
        """
        self._store = store
        self._hasher = hasher
        self._tokens = tokens

    @classmethod
    def from_config(
        cls,
        config: AuthConfig,
        store: Optional[AccountStorePort] = None,
    ) -> "AuthService":
        """
        Build a service from configuration.

        Raises:
            SigningMisconfigured: If the signing secret is absent or blank
        """
        from taskboard_auth.adapters import BcryptPasswordHasher, JWTTokenIssuer

        secret = config.require_signing_secret()
        tokens = JWTTokenIssuer(
            secret=secret,
            algorithm=config.jwt_algorithm,
            issuer=config.jwt_issuer,
            ttl_seconds=config.token_ttl_seconds,
        )
        hasher = BcryptPasswordHasher(rounds=config.bcrypt_rounds)
        return cls(
            store=store if store is not None else build_account_store(config),
            hasher=hasher,
            tokens=tokens,
        )

    def register(self, username: str, email: str, password: str) -> Account:
        """
        Register a new account.

        Args:
            username: Display name
            email: Email address (normalised before use)
            password: Plaintext password, hashed before it reaches the store

        Returns:
            Created account

        Raises:
            AccountExists: If the email is already registered
            StoreUnavailable: If the store fails
        """
        email = normalize_email(email)

        if self._find(email) is not None:
            raise AccountExists(f"Email already registered: {email}")

        password_hash = self._hasher.hash(password)

        try:
            account = self._store.create(username, email, password_hash)
        except DuplicateEmail as e:
            # Lost a race against a concurrent registration
            raise AccountExists(str(e)) from e
        except StoreUnavailable:
            logger.exception("Account store failed during create")
            raise
        except Exception as e:
            logger.exception("Account store failed during create")
            raise StoreUnavailable("Account store failed during create") from e

        logger.info("Registered account %s", account.account_id)
        return account

    def login(self, email: str, password: str) -> SessionToken:
        """
        Exchange credentials for a session token.

        Args:
            email: Email address
            password: Plaintext password

        Returns:
            Session token valid for the configured TTL

        Raises:
            InvalidCredentials: Unknown email or wrong password (same error
                for both)
            StoreUnavailable: If the store fails
        """
        account = self._find(normalize_email(email))

        if account is None:
            self._hasher.burn(password)
            logger.info("Login rejected")
            raise InvalidCredentials()

        if not self._hasher.verify(password, account.password_hash):
            logger.info("Login rejected")
            raise InvalidCredentials()

        session = self._tokens.issue(account.account_id)
        logger.info("Login: %s", account.account_id)
        return session

    def verify(self, token: str) -> SessionToken:
        """
        Verify a bearer token without a store lookup.

        Raises:
            InvalidToken: If the token is invalid or expired
        """
        return self._tokens.verify(token)

    def _find(self, email: str) -> Optional[Account]:
        """Store lookup with every fault downgraded to StoreUnavailable."""
        try:
            return self._store.find_by_email(email)
        except StoreUnavailable:
            logger.exception("Account store failed during lookup")
            raise
        except Exception as e:
            logger.exception("Account store failed during lookup")
            raise StoreUnavailable("Account store failed during lookup") from e
