from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """
    Make a datetime timezone-aware.

    Naive values are taken to be UTC so they can be compared with the clock.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
