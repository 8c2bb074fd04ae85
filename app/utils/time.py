"""Timestamp helpers. All datetimes are timezone-aware UTC."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current UTC datetime, used for chunk record created_at."""
    return datetime.now(timezone.utc)
