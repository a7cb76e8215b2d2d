"""Utilities for UTC timestamps."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a naive timestamp.

    Analysis times are stored naive in UTC, so comparisons against them
    must use naive values too.
    """
    return datetime.now(UTC).replace(tzinfo=None)
