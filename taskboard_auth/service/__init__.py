"""
Service - Registration, login and token verification.
"""

from taskboard_auth.service.auth_service import AuthService, build_account_store

__all__ = [
    "AuthService",
    "build_account_store",
]
