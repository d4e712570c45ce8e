"""
Issue Tracker Configuration

Centralized configuration for the tracker and its command line.
"""

import logging
import os
from pathlib import Path

# =============================================================================
# Logging Configuration
# =============================================================================

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

# Default level (can be overridden by env var)
DEFAULT_LOG_LEVEL = os.environ.get("TRACKER_LOG_LEVEL", "warning")

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_log_level(level_name: str = None) -> int:
    """
    Get the logging level for a given level name.

    Args:
        level_name: Level name (debug, info, ...), any case

    Returns:
        logging level constant, WARNING for unknown names
    """
    name = level_name or DEFAULT_LOG_LEVEL
    return LOG_LEVELS.get(name.strip().lower(), logging.WARNING)


# =============================================================================
# Seed Data Configuration
# =============================================================================

DEFAULT_SEED_FILE = Path(__file__).parent / "data" / "seed.yaml"
SEED_FILE = Path(os.environ.get("TRACKER_SEED_FILE", str(DEFAULT_SEED_FILE)))


# Print configuration on import (for debugging)
if __name__ == "__main__":
    print("Issue Tracker Configuration")
    print("=" * 50)
    print(f"Log Level: {DEFAULT_LOG_LEVEL} -> {logging.getLevelName(get_log_level())}")
    print(f"Seed File: {SEED_FILE}")
