"""Conversions between domain datetimes and persisted Unix milliseconds."""

from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
ONE_MILLISECOND = timedelta(milliseconds=1)


def to_millis(value: datetime) -> int:
    """Convert an aware datetime to integer Unix milliseconds, rounding down."""
    return (value - EPOCH) // ONE_MILLISECOND


def from_millis(value: int) -> datetime:
    """Convert integer Unix milliseconds to an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=value)


# Representable range of aware datetimes, in Unix milliseconds
MIN_MILLIS = to_millis(datetime.min.replace(tzinfo=UTC))
MAX_MILLIS = to_millis(datetime.max.replace(tzinfo=UTC))


def truncate_to_millis(value: datetime) -> datetime:
    """Drop sub-millisecond precision so the value survives a store round-trip."""
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)
