"""
Session Token Domain Model - A signed, time-bounded bearer token.
"""

from dataclasses import dataclass
from typing import Optional
from datetime import datetime, timezone


@dataclass(frozen=True)
class SessionToken:
    """
    Session token - the result of a successful login.

    Domain rules:
    - subject is the account_id the token was issued for
    - expires_at = issued_at + TTL (1 hour by default)
    - tokens are stateless: never persisted, never revoked, they just expire
    """
    token: str
    subject: str
    issued_at: datetime
    expires_at: datetime

    def expires_in(self, now: Optional[datetime] = None) -> int:
        """Seconds until expiry (0 once expired)."""
        now = now or datetime.now(timezone.utc)
        return max(0, int((self.expires_at - now).total_seconds()))
