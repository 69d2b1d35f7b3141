"""Timestamp helpers shared by models."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return current UTC time as timezone-naive datetime for DB storage."""
    return datetime.now(UTC).replace(tzinfo=None)
