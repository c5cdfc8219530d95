"""Logging configuration for a launcher run.

Library modules log through ``logging.getLogger(__name__)``; this module
attaches a single stderr handler to the package logger and picks its
level from ``-X`` (debug) and ``-q`` (errors only).
"""

from __future__ import annotations

import logging
import sys

from mvn_cling.core.models import OptionSet

PACKAGE_LOGGER: str = "mvn_cling"
HANDLER_NAME: str = "mvn-cling"
LOG_FORMAT: str = "[%(levelname)s] %(message)s"


def level_for(options: OptionSet) -> int:
    if options.verbose:
        return logging.DEBUG
    if options.quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(options: OptionSet) -> logging.Logger:
    """Attach (or replace) the package stderr handler and set its level."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level_for(options))
    return logger
