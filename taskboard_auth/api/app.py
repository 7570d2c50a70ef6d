"""
FastAPI application factory.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskboard_auth import __version__
from taskboard_auth.api.routes import router as auth_router
from taskboard_auth.config import AuthConfig
from taskboard_auth.errors import AuthError, InvalidRequest, StoreUnavailable
from taskboard_auth.ports.account_store_port import AccountStorePort
from taskboard_auth.service.auth_service import AuthService

logger = logging.getLogger(__name__)


def _error_response(exc: AuthError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.public_message})


async def _handle_auth_error(request: Request, exc: AuthError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %r", request.method, request.url.path, exc)
    return _error_response(exc)


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s %s body: %s", request.method, request.url.path, exc.errors())
    return _error_response(InvalidRequest())


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(StoreUnavailable())


def create_app(
    config: Optional[AuthConfig] = None,
    *,
    service: Optional[AuthService] = None,
    store: Optional[AccountStorePort] = None,
) -> FastAPI:
    """
    Build the app.

    The service (and with it the signing secret) is built here, before the
    first request, so a missing JWT_SECRET stops startup with
    SigningMisconfigured instead of failing per request.
    """
    config = config or AuthConfig()
    if service is None:
        service = AuthService.from_config(config, store=store)

    app = FastAPI(title="taskboard-auth", version=__version__)
    app.state.config = config
    app.state.auth_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AuthError, _handle_auth_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected)

    app.include_router(auth_router)
    return app
