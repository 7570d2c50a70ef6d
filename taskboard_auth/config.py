"""
Service configuration loaded once from the process environment.
"""

from typing import Any, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from typing_extensions import Annotated

from taskboard_auth.errors import SigningMisconfigured


class AuthConfig(BaseSettings):
    # ── Token signing ────────────────────────────────────────────────────
    jwt_secret: str = ""                 # HMAC secret for session tokens (required)
    jwt_issuer: str = "taskboard-auth"
    jwt_algorithm: str = "HS256"
    token_ttl_seconds: int = 3600        # 1 hour

    # ── Password hashing ─────────────────────────────────────────────────
    bcrypt_rounds: int = 10

    # ── Account store ────────────────────────────────────────────────────
    store_backend: str = "memory"        # memory | redis | dynamodb
    redis_url: str = "redis://localhost:6379/0"
    dynamodb_table: str = "taskboard-accounts"
    aws_region: str = "us-east-1"

    # ── Server ───────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: Annotated[List[str], NoDecode] = ["*"]   # comma-separated in the env
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    def require_signing_secret(self) -> str:
        """Return the signing secret, or fail if it is absent or blank."""
        if not self.jwt_secret or not self.jwt_secret.strip():
            raise SigningMisconfigured("JWT_SECRET is not set; refusing to issue tokens")
        return self.jwt_secret
