"""Calendar-day identifiers and day-level arithmetic.

A day identifier is a ``YYYY-MM-DD`` string in the host timezone. Identifiers
sort lexicographically in calendar order, which the analytics services rely on.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

DAY_FORMAT = "%Y-%m-%d"
_DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def day_id(moment: date | datetime) -> str:
    """Return the local calendar-day identifier for ``moment``.

    Naive datetimes are taken as local time; aware datetimes are converted to
    the host timezone before the time of day is dropped.
    """

    if isinstance(moment, datetime):
        if moment.tzinfo is not None:
            moment = moment.astimezone()
        moment = moment.date()
    return moment.isoformat()


def today_id() -> str:
    return day_id(datetime.now())


def parse_day(value: str) -> date:
    """Parse a day identifier into a ``date``."""

    return datetime.strptime(value, DAY_FORMAT).date()


def is_day_id(value: object) -> bool:
    """True when ``value`` is a well-formed, existing ``YYYY-MM-DD`` day."""

    if not isinstance(value, str) or not _DAY_PATTERN.match(value):
        return False
    try:
        parse_day(value)
    except ValueError:
        return False
    return True


def subtract_days(day: str, n: int) -> str:
    """Return the identifier ``n`` days before ``day`` (negative ``n`` moves forward).

    Results past the supported calendar range are pinned to its first or last
    day.
    """

    start = parse_day(day)
    try:
        return day_id(start - timedelta(days=n))
    except OverflowError:
        return day_id(date.min if n > 0 else date.max)


def day_difference(a: str, b: str) -> int:
    """Number of calendar days from ``b`` to ``a`` (``a - b``).

    Works on calendar dates, never on timestamps, so DST transitions cannot
    produce fractional days.
    """

    return (parse_day(a) - parse_day(b)).days


def resolve_today(today: str | date | datetime | None = None) -> str:
    """Normalize an optional ``today`` override to a day identifier."""

    if today is None:
        return today_id()
    if isinstance(today, str):
        return today
    return day_id(today)


__all__ = [
    "DAY_FORMAT",
    "day_difference",
    "day_id",
    "is_day_id",
    "parse_day",
    "resolve_today",
    "subtract_days",
    "today_id",
]
