from __future__ import annotations

from collections.abc import Iterator
from datetime import date, timedelta

# ISO weekday numbers (Monday == 1 ... Sunday == 7)
_SATURDAY = 6
_SUNDAY = 7


def is_weekend(day: date) -> bool:
    """Check if $day falls on a Saturday or Sunday.

    Args:
        day (date): The calendar date to check.

    Returns:
        bool: True for Saturday and Sunday; otherwise False.
    """
    return day.isoweekday() in (_SATURDAY, _SUNDAY)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from $start to $end, both inclusive.

    Args:
        start (date): First day.
        end (date): Last day; must not be before $start.

    Yields:
        date: Each day in ascending order.

    Raises:
        ValueError: If $end is before $start.
    """
    # Raise: an inverted range has no days
    if end < start:
        raise ValueError(f"Cannot call `iter_days` because $end ({end}) is before $start ({start})")

    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)
