"""Date and time utilities."""

import math
from datetime import date, datetime
from enum import IntEnum
from typing import Iterable, Optional, Union

DateLike = Union[date, datetime]

SECONDS_PER_DAY = 24 * 3600


class Weekday(IntEnum):
    """Canonical weekday, Monday first (same numbering as ``date.weekday()``).

    Stored settings number days Sunday = 0 instead; see ``day_number``.
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def day_number(self) -> int:
        """Stored day number: Sunday = 0, Monday = 1 ... Saturday = 6."""
        return (self.value + 1) % 7

    @classmethod
    def from_day_number(cls, number: int) -> 'Weekday':
        if not 0 <= number <= 6:
            raise ValueError(f"Day number out of range: {number!r}")
        return cls((number - 1) % 7)

    @classmethod
    def parse(cls, value) -> 'Weekday':
        """Accept a Weekday, a stored day number (Sunday = 0) or a day name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls.from_day_number(value)
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
        raise ValueError(f"Unknown weekday: {value!r}")


# Monday -> Sunday, used for display and grouping
CANONICAL_WEEKDAYS = tuple(Weekday)

# Sunday -> Saturday, the calendar enumeration order used for tie-breaking
SUNDAY_FIRST_WEEKDAYS = tuple(sorted(Weekday, key=lambda day: day.day_number))

DEFAULT_WORK_DAYS = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
)


def weekday_of(moment: DateLike) -> Weekday:
    """Weekday of a date or datetime, in the moment's own time zone."""
    return Weekday(moment.weekday())


def format_work_days(days: Iterable) -> str:
    """Format work days as a comma separated list of names, Sunday first."""
    parsed = sorted({Weekday.parse(day) for day in days}, key=lambda day: day.day_number)
    if not parsed:
        return "None set"
    return ", ".join(day.display_name for day in parsed)


def to_datetime(moment: DateLike, like: Optional[datetime] = None) -> datetime:
    """Promote a date to midnight, adopting the time zone of ``like``."""
    if isinstance(moment, datetime):
        result = moment
    else:
        result = datetime.combine(moment, datetime.min.time())

    if like is not None:
        if like.tzinfo is not None and result.tzinfo is None:
            result = result.replace(tzinfo=like.tzinfo)
        elif like.tzinfo is None and result.tzinfo is not None:
            result = result.replace(tzinfo=None)
    return result


def ceil_days_between(start: DateLike, end: DateLike) -> int:
    """Number of days from ``start`` to ``end``, rounded up (may be negative)."""
    start_dt = to_datetime(start)
    end_dt = to_datetime(end, like=start_dt)
    delta = end_dt - start_dt
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def parse_date(value) -> Optional[date]:
    """Parse an ISO date (or datetime) string into a date."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if len(text) > 10:
        return parse_datetime(text).date()
    return date.fromisoformat(text)


def parse_datetime(value) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z`` for UTC."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)
