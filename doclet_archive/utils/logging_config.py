"""Logging setup for archive generation runs."""

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, log_format: str = LOG_FORMAT):
    """
    Send log records to stderr, keeping stdout for the progress line.

    Args:
        verbose: Log at INFO level instead of ERROR
        log_format: Format of each record, prefixed with level and logger name by default
    """
    level = logging.INFO if verbose else logging.ERROR
    logging.basicConfig(level=level, format=log_format, stream=sys.stderr, force=True)
