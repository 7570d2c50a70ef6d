"""
Integration tests for Redis account store.

Requires Redis running on localhost:6379
Skip tests if Redis is not available.
"""

import pytest
from taskboard_auth.errors import DuplicateEmail, StoreUnavailable


@pytest.fixture
def redis_store():
    """Create Redis account store (skip if Redis unavailable)."""
    redis = pytest.importorskip("redis")
    from taskboard_auth.adapters import RedisAccountStore

    r = redis.Redis(host="localhost", port=6379, decode_responses=True)
    try:
        r.ping()
    except redis.exceptions.ConnectionError:
        pytest.skip("Redis not available")

    store = RedisAccountStore(redis_client=r, prefix="test:account:")
    yield store

    # Cleanup: delete all test accounts
    for key in r.scan_iter("test:account:*"):
        r.delete(key)


class TestRedisAccountStore:
    """Test Redis account storage."""

    def test_create_account(self, redis_store):
        """Test account creation in Redis."""
        account = redis_store.create("ann", "a@x.com", "hash")

        assert account.account_id is not None
        assert account.email == "a@x.com"

    def test_find_account(self, redis_store):
        """Test account retrieval."""
        created = redis_store.create("ann", "a@x.com", "hash")

        found = redis_store.find_by_email("A@X.com")
        assert found is not None
        assert found.account_id == created.account_id
        assert found.password_hash == "hash"

    def test_find_missing(self, redis_store):
        """Test lookup of an unknown email."""
        assert redis_store.find_by_email("nobody@x.com") is None

    def test_duplicate_email(self, redis_store):
        """Test SET NX rejects a second account for the same email."""
        redis_store.create("ann", "a@x.com", "hash")

        with pytest.raises(DuplicateEmail):
            redis_store.create("bob", "a@x.com", "other")

        assert redis_store.find_by_email("a@x.com").username == "ann"


def test_unreachable_redis_is_store_unavailable():
    """Test connection errors are not reported as 'not found'."""
    redis = pytest.importorskip("redis")
    from taskboard_auth.adapters import RedisAccountStore

    client = redis.Redis(host="127.0.0.1", port=1, socket_connect_timeout=0.2)
    store = RedisAccountStore(redis_client=client)

    with pytest.raises(StoreUnavailable):
        store.find_by_email("a@x.com")

    with pytest.raises(StoreUnavailable):
        store.create("ann", "a@x.com", "hash")
