"""
Adapters - Implementations of ports.

Account Storage:
- MemoryAccountStore: In-memory accounts (testing)
- RedisAccountStore: Redis-backed accounts
- DynamoDBAccountStore: AWS DynamoDB accounts

Credentials & Tokens:
- BcryptPasswordHasher: bcrypt password hashing
- JWTTokenIssuer: JWT session tokens
"""

# Account Storage
from taskboard_auth.adapters.memory_store import MemoryAccountStore
from taskboard_auth.adapters.redis_store import RedisAccountStore
from taskboard_auth.adapters.dynamodb_store import DynamoDBAccountStore

# Credentials & Tokens
from taskboard_auth.adapters.bcrypt_hasher import BcryptPasswordHasher
from taskboard_auth.adapters.jwt_tokens import JWTTokenIssuer

__all__ = [
    # Account Storage
    "MemoryAccountStore",
    "RedisAccountStore",
    "DynamoDBAccountStore",
    # Credentials & Tokens
    "BcryptPasswordHasher",
    "JWTTokenIssuer",
]
