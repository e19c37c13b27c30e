"""Logging helper for TinyScript.

Library modules log through named standard library loggers and never install
handlers; the console front end configures output.
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a module, typically called with ``__name__``."""
    return logging.getLogger(name)
