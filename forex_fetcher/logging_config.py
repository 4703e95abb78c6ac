"""
Console logging for the app.
All modules get their logger through get_logger(__name__); the root logger is
configured on first use. Set LOG_LEVEL to change verbosity (default INFO).
"""

import logging

from forex_fetcher.config import LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL

_root_configured = False


def _configure_root_logger() -> None:
    global _root_configured
    if _root_configured:
        return

    root = logging.getLogger()
    root.setLevel(LOG_LEVEL)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVEL)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(console_handler)

    # requests' connection pool is chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _root_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the named logger, configuring the root logger once."""
    _configure_root_logger()
    return logging.getLogger(name)
