"""
Unit tests for in-memory account store.
"""

import threading
import pytest
from taskboard_auth.adapters.memory_store import MemoryAccountStore
from taskboard_auth.errors import AccountExists, DuplicateEmail


def test_create_and_find():
    """Test account creation and lookup."""
    store = MemoryAccountStore()

    created = store.create("ann", "a@x.com", "hash")
    found = store.find_by_email("a@x.com")

    assert found == created
    assert len(store) == 1


def test_find_missing():
    """Test lookup of an unknown email."""
    store = MemoryAccountStore()
    assert store.find_by_email("nobody@x.com") is None


def test_lookup_is_normalised():
    """Test that case and whitespace variants find the same account."""
    store = MemoryAccountStore()
    store.create("ann", "a@x.com", "hash")

    assert store.find_by_email(" A@X.COM ") is not None


def test_duplicate_email_rejected():
    """Test uniqueness, regardless of the other fields."""
    store = MemoryAccountStore()
    store.create("ann", "a@x.com", "hash")

    with pytest.raises(DuplicateEmail):
        store.create("bob", "A@x.com", "other-hash")

    assert len(store) == 1
    assert store.find_by_email("a@x.com").username == "ann"


def test_duplicate_is_account_exists():
    """Test that store duplicates map to the client-facing error."""
    assert issubclass(DuplicateEmail, AccountExists)


def test_concurrent_creates_single_winner():
    """Test that racing creates for one email leave exactly one account."""
    store = MemoryAccountStore()
    barrier = threading.Barrier(8)
    outcomes = []

    def register(n):
        barrier.wait()
        try:
            store.create(f"user{n}", "race@x.com", "hash")
            outcomes.append("created")
        except DuplicateEmail:
            outcomes.append("duplicate")

    threads = [threading.Thread(target=register, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("created") == 1
    assert outcomes.count("duplicate") == 7
    assert len(store) == 1
