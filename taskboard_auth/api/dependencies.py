"""
FastAPI dependencies for the auth routes.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskboard_auth.domain.token import SessionToken
from taskboard_auth.errors import InvalidToken
from taskboard_auth.service.auth_service import AuthService

_bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_service(request: Request) -> AuthService:
    """Return the service built once at app creation."""
    return request.app.state.auth_service


async def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    service: AuthService = Depends(get_auth_service),
) -> SessionToken:
    """
    Extract and verify the Bearer token.

    Raises ``InvalidToken`` (401) when the header is missing or the token
    does not verify.
    """
    if credentials is None or not credentials.credentials:
        raise InvalidToken("Missing bearer token")
    return await run_in_threadpool(service.verify, credentials.credentials)
