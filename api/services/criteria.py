"""
Criteria decoding - Turns raw query parameters into a FilterCriteria.

Malformed values never produce an error response: an unparseable age, price,
date or bucket simply leaves that criterion out.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from campfinder.models import FilterCriteria, TimeOfDay
from campfinder.schedule import normalize_weekdays, parse_date

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes", "on")


def parse_positive_int(value: str | None) -> int | None:
    """Leading-integer parse in the manner of parseInt; non-positive results are dropped."""
    if value is None:
        return None
    text = value.strip()
    digits = ""
    for i, ch in enumerate(text):
        if ch.isdigit() or (i == 0 and ch in "+-"):
            digits += ch
        else:
            break
    try:
        number = int(digits)
    except ValueError:
        logger.debug(f"Ignoring non-numeric age {value!r}")
        return None
    return number if number > 0 else None


def parse_amount(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    try:
        number = float(value)
    except ValueError:
        logger.debug(f"Ignoring non-numeric amount {value!r}")
        return None
    if math.isnan(number) or math.isinf(number) or number < 0:
        return None
    return number


def parse_iso_date(value: str | None) -> str | None:
    """Return the ISO form of a parseable date, or None."""
    parsed = parse_date(value)
    return parsed.isoformat() if parsed is not None else None


def parse_time_of_day(value: str | None) -> TimeOfDay | None:
    if not value:
        return None
    try:
        return TimeOfDay(value.strip().lower())
    except ValueError:
        logger.debug(f"Ignoring unknown timeOfDay {value!r}")
        return None


def parse_flag(value: str | None) -> bool:
    return bool(value) and value.strip().lower() in _TRUE_VALUES


def _clean(values: Iterable[str] | None) -> frozenset[str]:
    return frozenset(v for v in (values or ()) if v and v.strip())


def criteria_from_query(
    age: str | None = None,
    interests: Iterable[str] | None = None,
    date_range_start: str | None = None,
    date_range_end: str | None = None,
    week: str | None = None,
    days_of_week: Iterable[str] | None = None,
    time_of_day: str | None = None,
    zipcode: str | None = None,
    max_distance: str | None = None,
    min_price: str | None = None,
    max_price: str | None = None,
    hide_conflicts: str | None = None,
    child_id: str | None = None,
) -> FilterCriteria:
    """Decode query parameter strings into a FilterCriteria."""
    return FilterCriteria(
        age=parse_positive_int(age),
        interests=_clean(interests),
        date_range_start=parse_iso_date(date_range_start),
        date_range_end=parse_iso_date(date_range_end),
        week=parse_iso_date(week),
        days_of_week=normalize_weekdays(_clean(days_of_week)),
        time_of_day=parse_time_of_day(time_of_day),
        zipcode=zipcode.strip() if zipcode and zipcode.strip() else None,
        max_distance=parse_amount(max_distance),
        min_price=parse_amount(min_price),
        max_price=parse_amount(max_price),
        hide_conflicts=parse_flag(hide_conflicts),
        child_id=child_id.strip() if child_id and child_id.strip() else None,
    )
