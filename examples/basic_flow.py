"""
Basic Flow Example - Register, log in, verify the token.
"""

from taskboard_auth import AuthService, AuthConfig
from taskboard_auth.adapters import MemoryAccountStore
from taskboard_auth.errors import AccountExists, InvalidCredentials


def main():
    # Initialize service
    config = AuthConfig(jwt_secret="my-secret-key-for-local-testing-only")
    service = AuthService.from_config(config, store=MemoryAccountStore())

    # Register an account
    account = service.register("ann", "a@x.com", "secret1")
    print(f"Registered: {account.username} ({account.account_id})")

    # Registering again fails
    try:
        service.register("ann", "a@x.com", "secret1")
    except AccountExists as e:
        print(f"Second signup rejected: {e.public_message}")

    # Login
    session = service.login("a@x.com", "secret1")
    print(f"\nLogin successful!")
    print(f"Token: {session.token[:50]}...")
    print(f"Expires at: {session.expires_at.isoformat()}")

    # Wrong password
    try:
        service.login("a@x.com", "wrong")
    except InvalidCredentials as e:
        print(f"\nWrong password: {e.public_message}")

    # Verify token (no store lookup)
    verified = service.verify(session.token)
    print(f"\nToken verified for: {verified.subject}")
    print(f"Seconds left: {verified.expires_in()}")


if __name__ == "__main__":
    main()
