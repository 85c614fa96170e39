"""
Command-line entry point - Create one demo user and log the outcome.

Usage:
    USERS_CLIENT_BASE_URL=https://jsonplaceholder.typicode.com python -m users_client

Exit codes: 0 on success, 1 on a ClientError, 2 on a configuration error.
"""

import asyncio
import logging
import sys

from users_client.config import build_users_client, get_settings
from users_client.config.log import configure_logging
from users_client.domain.exceptions import ConfigurationError

logger = logging.getLogger("users_client")

EXIT_OK = 0
EXIT_CLIENT_ERROR = 1
EXIT_CONFIG_ERROR = 2


async def run(name: str = "John Doe", email: str = "john.doe@example.com") -> int:
    """Create a single user and map the outcome to an exit code."""
    async with build_users_client(get_settings()) as client:
        outcome = await client.create_user(name, email)

    if outcome.succeeded:
        logger.info("API success: User Created: %s, ID: %s", outcome.user.name, outcome.user.id)
        return EXIT_OK

    logger.error("API error: %s", outcome.error)
    return EXIT_CLIENT_ERROR


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        return asyncio.run(run())
    except ConfigurationError as err:
        logger.critical("Configuration error: %s", err)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
