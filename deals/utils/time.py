"""Time helpers.

All deal timestamps are kept timezone-aware in UTC so expiry checks never
compare naive and aware datetimes.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and convert aware ones to UTC.

    Raises:
        ValueError: The instant has no representation in UTC (for example
            9999-12-31T23:00:00-05:00)
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError("endTime out of range") from e
