"""Logging setup for the command-line entry point."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Install a stream handler on the root logger.

    Library modules only create loggers; handlers are configured here,
    by the application that embeds the client.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # httpx logs each request at INFO; USERS_CLIENT_LOG_HTTP covers that at DEBUG
    logging.getLogger("httpx").setLevel(logging.WARNING)
