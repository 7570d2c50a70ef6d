"""
Auth API routes - signup, login, session check.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool

from taskboard_auth.api.dependencies import get_auth_service, get_current_session
from taskboard_auth.api.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    SessionResponse,
)
from taskboard_auth.domain.token import SessionToken
from taskboard_auth.service.auth_service import AuthService

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
    req: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    """Register a new account."""
    # bcrypt is CPU-bound; keep it off the event loop
    await run_in_threadpool(service.register, req.username, req.email, req.password)
    return MessageResponse(message="User registered successfully!")


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Exchange email + password for a bearer token."""
    session = await run_in_threadpool(service.login, req.email, req.password)
    return LoginResponse(
        token=session.token,
        expires_in=session.expires_in(),
        message="Login successful!",
    )


@router.get("/session", response_model=SessionResponse)
async def current_session(
    session: SessionToken = Depends(get_current_session),
) -> SessionResponse:
    """Describe the presented token."""
    return SessionResponse(
        subject=session.subject,
        expires_at=session.expires_at,
        expires_in=session.expires_in(),
        message="Token valid!",
    )


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}
