"""
Error taxonomy for registration and login.

Every error carries the HTTP status it maps to and the short message shown
to the client. Internal detail stays in the exception chain and the logs.
"""


class AuthError(Exception):
    """Base class for all auth errors."""

    status_code = 500
    public_message = "Server Error!"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.public_message)
        self.detail = detail


class AccountExists(AuthError):
    """An account with this email is already registered."""

    status_code = 400
    public_message = "User already exists!"


class DuplicateEmail(AccountExists):
    """Raised by a store when its unique-email constraint rejects an insert."""


class InvalidCredentials(AuthError):
    """
    Login failed.

    Raised for both an unknown email and a wrong password, with the same
    status and message, so callers cannot probe which emails are registered.
    """

    status_code = 400
    public_message = "Invalid credentials!"


class InvalidToken(AuthError):
    """Bearer token is malformed, has a bad signature, or has expired."""

    status_code = 401
    public_message = "Invalid token!"


class InvalidRequest(AuthError):
    """Request body is missing a required field."""

    status_code = 400
    public_message = "Invalid request!"


class StoreUnavailable(AuthError):
    """The account store failed. Details are never returned to the client."""


class SigningMisconfigured(AuthError):
    """The token signing secret is absent or empty. Fatal at startup."""
