"""
Logging setup for the object-location CLI.

Library modules only create loggers under PACKAGE_LOGGER; handlers are
attached by whichever process runs the CLI.
"""

import logging

PACKAGE_LOGGER = "object_location"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """
    Install the root handler (if none yet) and set the package log level.

    The package logger gets the level even when the root logger was already
    configured by a host process, so rejected-input debug lines still surface.
    Returns the package logger.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    return package_logger
