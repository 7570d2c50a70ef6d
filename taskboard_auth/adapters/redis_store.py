"""
Redis Account Store - Redis-backed account storage.
"""

from typing import Optional
import json
import logging
from taskboard_auth.ports.account_store_port import AccountStorePort
from taskboard_auth.domain.account import Account, normalize_email
from taskboard_auth.errors import DuplicateEmail, StoreUnavailable

logger = logging.getLogger(__name__)


class RedisAccountStore(AccountStorePort):
    """
    Redis-backed account storage.

    Accounts are stored as JSON under one key per email. Creation uses
    SET NX, so uniqueness holds across processes without a read-then-write.
    """

    def __init__(
        self,
        redis_client=None,
        redis_url: str = "redis://localhost:6379/0",
        prefix: str = "taskboard:account:",
    ):
        """
        Initialize Redis account store.

        Args:
            redis_client: Redis client instance (redis.Redis)
            redis_url: URL used when no client is given
            prefix: Key prefix for accounts
        """
        self._redis = redis_client
        self._redis_url = redis_url
        self._prefix = prefix

    def _get_redis(self):
        """Lazy load Redis client."""
        if self._redis is None:
            try:
                import redis
            except ImportError:
                raise ImportError("redis package required: pip install redis")
            self._redis = redis.Redis.from_url(self._redis_url, decode_responses=True)
        return self._redis

    def _key(self, email: str) -> str:
        """Generate Redis key for an account."""
        return f"{self._prefix}{normalize_email(email)}"

    def find_by_email(self, email: str) -> Optional[Account]:
        """
        Get an account from Redis.

        Args:
            email: Email address

        Returns:
            Account if found, None otherwise
        """
        client = self._get_redis()
        from redis.exceptions import RedisError

        try:
            data = client.get(self._key(email))
        except RedisError as e:
            logger.error("Redis lookup failed: %s", e)
            raise StoreUnavailable("Redis lookup failed") from e

        if not data:
            return None

        try:
            return Account.from_dict(json.loads(data))
        except (json.JSONDecodeError, KeyError, ValueError) as e:
            raise StoreUnavailable(f"Corrupt account record at {self._key(email)}") from e

    def create(self, username: str, email: str, password_hash: str) -> Account:
        """
        Create an account in Redis.

        Args:
            username: Display name
            email: Email address
            password_hash: Hashed password

        Returns:
            Created account
        """
        client = self._get_redis()
        from redis.exceptions import RedisError

        account = Account.create(username=username, email=email, password_hash=password_hash)

        try:
            stored = client.set(
                self._key(account.email),
                json.dumps(account.to_dict()),
                nx=True,
            )
        except RedisError as e:
            logger.error("Redis insert failed: %s", e)
            raise StoreUnavailable("Redis insert failed") from e

        if not stored:
            raise DuplicateEmail(f"Email already registered: {account.email}")

        return account
