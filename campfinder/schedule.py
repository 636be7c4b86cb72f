"""Date, time and weekday helpers shared by the filter and conflict checks.

Every parser returns None instead of raising so that a bad catalog value only
makes its own session non-matching.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime, time

logger = logging.getLogger(__name__)

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_WEEKDAY_LOOKUP = {name.lower(): name for name in WEEKDAYS} | {name[:3].lower(): name for name in WEEKDAYS}


def parse_date(value: str | date | None) -> date | None:
    """Parse an ISO date or timestamp string into a date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        logger.debug(f"Ignoring unparseable date {value!r}")
        return None


def parse_time(value: str | time | None) -> time | None:
    """Parse a wall-clock "HH:MM" or "HH:MM:SS" string."""
    if value is None:
        return None
    if isinstance(value, time):
        return value
    text = str(value).strip()
    if not text:
        return None
    if text[1:2] == ":":
        text = f"0{text}"
    try:
        return time.fromisoformat(text)
    except ValueError:
        logger.debug(f"Ignoring unparseable time {value!r}")
        return None


def normalize_weekday(value: str) -> str:
    """Map "mon", "MONDAY" or "Monday" to "Monday"; unknown names are only trimmed."""
    text = value.strip()
    return _WEEKDAY_LOOKUP.get(text.lower(), text)


def normalize_weekdays(values: Iterable[str] | None) -> frozenset[str]:
    if not values:
        return frozenset()
    return frozenset(normalize_weekday(v) for v in values if v and v.strip())


def ranges_overlap(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    """Inclusive interval overlap; symmetric in its two intervals."""
    return a_start <= b_end and a_end >= b_start


def session_in_date_range(
    session_start: str | None,
    session_end: str | None,
    range_start: str | date | None,
    range_end: str | date | None,
) -> bool:
    """Whether a session's dates overlap a possibly one-sided range.

    With both bounds this is the two-sided overlap; with one bound it
    degrades to `end >= range_start` or `start <= range_end`.
    """
    start = parse_date(session_start)
    end = parse_date(session_end)
    if start is None or end is None:
        return False

    lower = parse_date(range_start)
    upper = parse_date(range_end)
    if lower is not None and upper is not None:
        return ranges_overlap(start, end, lower, upper)
    if lower is not None:
        return end >= lower
    if upper is not None:
        return start <= upper
    return True


def session_contains_date(session_start: str | None, session_end: str | None, day: str | date | None) -> bool:
    start = parse_date(session_start)
    end = parse_date(session_end)
    target = parse_date(day)
    if start is None or end is None or target is None:
        return False
    return start <= target <= end


def monday_of(day: date) -> date:
    return date.fromordinal(day.toordinal() - day.weekday())
