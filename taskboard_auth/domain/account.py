"""
Account Domain Model - A registered user.
"""

from dataclasses import dataclass, field
from typing import Dict, Any
from datetime import datetime, timezone
import uuid


def normalize_email(email: str) -> str:
    """
    Canonical form used for every lookup and uniqueness check.

    Surrounding whitespace is stripped and the whole address is lowercased,
    so "Ann@X.com " and "ann@x.com" name the same account.
    """
    return email.strip().lower()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Account:
    """
    Account entity - represents a registered user.

    Domain rules:
    - account_id is assigned once at creation and never changes
    - email is unique across all accounts (enforced by the store)
    - password_hash is a salted one-way hash, never the plaintext
    - accounts are immutable once created
    """
    account_id: str
    username: str
    email: str
    password_hash: str = field(repr=False)
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(cls, username: str, email: str, password_hash: str) -> "Account":
        """
        Create a new account with a generated ID.

        Args:
            username: Display name (not unique)
            email: Email address, normalised before storing
            password_hash: Already-hashed password credential

        Returns:
            New account instance
        """
        return cls(
            account_id=uuid.uuid4().hex,
            username=username,
            email=normalize_email(email),
            password_hash=password_hash,
        )

    def to_public_dict(self) -> Dict[str, Any]:
        """Serialize without the credential, safe to return to clients."""
        return {
            "account_id": self.account_id,
            "username": self.username,
            "email": self.email,
            "created_at": self.created_at.isoformat(),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for persistence (includes the password hash)."""
        data = self.to_public_dict()
        data["password_hash"] = self.password_hash
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Account":
        """Deserialize from a stored dict."""
        created_at = data.get("created_at")
        return cls(
            account_id=data["account_id"],
            username=data["username"],
            email=data["email"],
            password_hash=data["password_hash"],
            created_at=datetime.fromisoformat(created_at) if created_at else _utcnow(),
        )
