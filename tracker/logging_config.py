"""
Logging setup for the tracker command line.
"""

import logging

from tracker.config import LOG_FORMAT, get_log_level


def setup_logging(level_name: str = None) -> None:
    """Configure root logging once for CLI runs."""
    logging.basicConfig(level=get_log_level(level_name), format=LOG_FORMAT)
