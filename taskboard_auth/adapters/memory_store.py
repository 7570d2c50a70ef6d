"""
Memory Account Store - In-memory account storage (testing only).
"""

import threading
from typing import Optional, Dict
from taskboard_auth.ports.account_store_port import AccountStorePort
from taskboard_auth.domain.account import Account, normalize_email
from taskboard_auth.errors import DuplicateEmail


class MemoryAccountStore(AccountStorePort):
    """
    In-memory account storage.

    WARNING: Only for testing. Accounts are lost on restart.
    Not suitable for production or distributed deployments.
    """

    def __init__(self):
        """Initialize in-memory storage."""
        self._accounts: Dict[str, Account] = {}
        self._lock = threading.Lock()

    def find_by_email(self, email: str) -> Optional[Account]:
        """Get an account from memory."""
        return self._accounts.get(normalize_email(email))

    def create(self, username: str, email: str, password_hash: str) -> Account:
        """Create an account in memory, rejecting a taken email."""
        account = Account.create(username=username, email=email, password_hash=password_hash)

        # Check and insert under one lock so concurrent creates cannot both win
        with self._lock:
            if account.email in self._accounts:
                raise DuplicateEmail(f"Email already registered: {account.email}")
            self._accounts[account.email] = account

        return account

    def __len__(self) -> int:
        return len(self._accounts)
