"""
Request / response bodies for the auth endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, constr


class RegisterRequest(BaseModel):
    username: constr(strip_whitespace=True, min_length=1)
    email: constr(strip_whitespace=True, min_length=1)
    password: constr(min_length=1)


class LoginRequest(BaseModel):
    email: constr(strip_whitespace=True, min_length=1)
    password: constr(min_length=1)


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    token: str
    expires_in: int
    message: str


class SessionResponse(BaseModel):
    subject: str
    expires_at: datetime
    expires_in: int
    message: str
