"""
Run the auth server: ``python -m taskboard_auth``.

Reads JWT_SECRET, PORT and the other settings from the environment once,
then serves with uvicorn.
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError
from pydantic_settings import SettingsError

from taskboard_auth.api.app import create_app
from taskboard_auth.config import AuthConfig
from taskboard_auth.errors import SigningMisconfigured

logger = logging.getLogger("taskboard_auth")


def main() -> int:
    try:
        config = AuthConfig()
    except (SettingsError, ValidationError) as e:
        logging.basicConfig(stream=sys.stderr)
        logger.critical("Refusing to start: invalid configuration: %s", e)
        return 1

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )

    try:
        app = create_app(config)
    except SigningMisconfigured as e:
        logger.critical("Refusing to start: %s", e)
        return 1

    logger.info("Server running on port %d (store: %s)", config.port, config.store_backend)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
