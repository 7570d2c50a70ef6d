"""
Taskboard Auth - Account registration & session tokens

Hexagonal architecture for signing users up and logging them in:
an account store port with pluggable backends, bcrypt password
hashing, and stateless JWT session tokens.

Usage:
    from taskboard_auth import AuthService, AuthConfig
    from taskboard_auth.adapters import MemoryAccountStore

    service = AuthService.from_config(
        AuthConfig(jwt_secret="your-secret"),
        store=MemoryAccountStore(),
    )

    # Register
    service.register("ann", "a@x.com", "secret1")

    # Login
    session = service.login("a@x.com", "secret1")
"""

__version__ = "0.1.0"

from taskboard_auth.config import AuthConfig
from taskboard_auth.service.auth_service import AuthService
from taskboard_auth.domain.account import Account
from taskboard_auth.domain.token import SessionToken

__all__ = [
    "AuthConfig",
    "AuthService",
    "Account",
    "SessionToken",
]
