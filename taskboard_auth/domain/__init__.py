"""
Domain Models - Pure business entities.

No infrastructure dependencies. Domain logic only.
"""

from taskboard_auth.domain.account import Account, normalize_email
from taskboard_auth.domain.token import SessionToken

__all__ = [
    "Account",
    "normalize_email",
    "SessionToken",
]
