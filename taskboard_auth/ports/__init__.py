"""
Ports - Interfaces for account storage, password hashing and token issuance.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from taskboard_auth.ports.account_store_port import AccountStorePort
from taskboard_auth.ports.hasher_port import PasswordHasherPort
from taskboard_auth.ports.token_port import TokenIssuerPort

__all__ = [
    "AccountStorePort",
    "PasswordHasherPort",
    "TokenIssuerPort",
]
