"""
Datetime utilities — single source of truth for timezone handling.

Rule: ALL tracker timestamps are timezone-aware (UTC).
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)
