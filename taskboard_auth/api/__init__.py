"""
HTTP API - FastAPI app exposing signup and login.
"""

from taskboard_auth.api.app import create_app

__all__ = ["create_app"]
