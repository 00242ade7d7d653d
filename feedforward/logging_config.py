"""
logging_config.py
~~~~~~~~~~~~~~~~~

Logging setup for applications and experiments using the package.

The library itself only creates module loggers; call
:func:`configure_logging` once from application code to see its
diagnostics.
"""

import os
import logging

PACKAGE_LOGGER = 'feedforward'

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging() -> int:
    """
    Set up logging based on environment.

    - ``LOG_LEVEL`` selects the level of the package logger (default INFO)
    - Unknown level names fall back to INFO

    Returns:
        int: The level applied to the package logger
    """
    log_level_str = os.getenv('LOG_LEVEL', 'INFO').upper()
    log_level = getattr(logging, log_level_str, None)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)

    return log_level
