"""Camp filter engine.

`filter_camps` applies every active predicate built from a FilterCriteria and
keeps the camps passing all of them, in input order. Predicates are
camp-level: a camp matches when at least one of its sessions satisfies the
criterion; sessions are never pruned from a matching camp.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

from .conflicts import camp_conflicts
from .logging_config import get_logger
from .models import Camp, CampSession, FilterCriteria, SavedSessionRef, TimeOfDay
from .schedule import normalize_weekdays, parse_date, parse_time, session_contains_date, session_in_date_range

logger = get_logger(__name__)

DEFAULT_MIN_AGE = 0
DEFAULT_MAX_AGE = 18
MORNING_CUTOFF_HOUR = 12
AFTERNOON_CUTOFF_HOUR = 17

CampPredicate = Callable[[Camp], bool]


def _any_session(camp: Camp, predicate: Callable[[CampSession], bool]) -> bool:
    return any(predicate(session) for session in camp.sessions)


def session_accepts_age(session: CampSession, age: int, default_max_age: int = DEFAULT_MAX_AGE) -> bool:
    min_age = session.min_age if session.min_age is not None else DEFAULT_MIN_AGE
    max_age = session.max_age if session.max_age is not None else default_max_age
    return min_age <= age <= max_age


def session_matches_time_of_day(session: CampSession, bucket: TimeOfDay) -> bool:
    """Bucket a session by the hour of its start and end times (minutes ignored)."""
    start = parse_time(session.start_time)
    end = parse_time(session.end_time)
    if start is None or end is None:
        return False

    if bucket is TimeOfDay.MORNING:
        return start.hour < MORNING_CUTOFF_HOUR
    if bucket is TimeOfDay.AFTERNOON:
        return MORNING_CUTOFF_HOUR <= start.hour < AFTERNOON_CUTOFF_HOUR and end.hour < AFTERNOON_CUTOFF_HOUR
    if bucket is TimeOfDay.FULL_DAY:
        return start.hour < MORNING_CUTOFF_HOUR and end.hour >= AFTERNOON_CUTOFF_HOUR
    return False


def session_in_price_range(session: CampSession, min_price: float | None, max_price: float | None) -> bool:
    if session.price is None:
        return False
    lower = min_price if min_price is not None else 0
    upper = max_price if max_price is not None else math.inf
    return lower <= session.price <= upper


def build_predicates(
    criteria: FilterCriteria,
    saved_sessions: Sequence[SavedSessionRef] = (),
    default_max_age: int = DEFAULT_MAX_AGE,
) -> list[tuple[str, CampPredicate]]:
    """Translate criteria into named camp predicates, skipping absent criteria."""
    predicates: list[tuple[str, CampPredicate]] = []

    if criteria.age is not None:
        age = criteria.age
        predicates.append(("age", lambda c: _any_session(c, lambda s: session_accepts_age(s, age, default_max_age))))

    if criteria.interests:
        wanted = criteria.interests
        predicates.append(("interests", lambda c: bool(c.interest_labels & wanted)))

    # An unparseable bound counts as absent
    lower, upper = parse_date(criteria.date_range_start), parse_date(criteria.date_range_end)
    if lower is not None or upper is not None:
        predicates.append(
            (
                "date_range",
                lambda c: _any_session(c, lambda s: session_in_date_range(s.start_date, s.end_date, lower, upper)),
            )
        )

    week = parse_date(criteria.week)
    if week is not None:
        predicates.append(
            ("week", lambda c: _any_session(c, lambda s: session_contains_date(s.start_date, s.end_date, week)))
        )

    if criteria.days_of_week:
        wanted_days = normalize_weekdays(criteria.days_of_week)
        predicates.append(
            ("days_of_week", lambda c: _any_session(c, lambda s: bool(normalize_weekdays(s.days_of_week) & wanted_days)))
        )

    if criteria.time_of_day is not None:
        bucket = criteria.time_of_day
        predicates.append(("time_of_day", lambda c: _any_session(c, lambda s: session_matches_time_of_day(s, bucket))))

    if criteria.zipcode or criteria.max_distance is not None:
        # No geocoder is wired in, so location never narrows the result
        logger.debug(f"Location filter requested (zipcode={criteria.zipcode}, max_distance={criteria.max_distance})")
        predicates.append(("location", lambda c: True))

    if criteria.min_price is not None or criteria.max_price is not None:
        low, high = criteria.min_price, criteria.max_price
        predicates.append(("price", lambda c: _any_session(c, lambda s: session_in_price_range(s, low, high))))

    if criteria.hide_conflicts and saved_sessions:
        saved = tuple(saved_sessions)
        predicates.append(("conflicts", lambda c: not camp_conflicts(c, saved)))

    return predicates


def filter_camps(
    camps: Iterable[Camp],
    criteria: FilterCriteria,
    saved_sessions: Sequence[SavedSessionRef] = (),
    default_max_age: int = DEFAULT_MAX_AGE,
) -> list[Camp]:
    """Return the camps matching every active criterion.

    Args:
        camps: Catalog camps, already sorted by the caller
        criteria: Filter bag; absent fields are ignored
        saved_sessions: The caller's saved sessions, used only when
            criteria.hide_conflicts is set
        default_max_age: Upper age bound assumed for sessions without max_age

    Returns:
        A new list holding the same Camp objects in their original order
    """
    camp_list = list(camps)
    if criteria.is_empty():
        return camp_list

    predicates = build_predicates(criteria, saved_sessions, default_max_age)
    if not predicates:
        return camp_list

    result: list[Camp] = []
    for camp in camp_list:
        failed = next((name for name, predicate in predicates if not predicate(camp)), None)
        if failed is None:
            result.append(camp)
        else:
            logger.trace(f"Dropped camp {camp.id} on {failed}")  # type: ignore[attr-defined]

    logger.debug(
        f"Filtered {len(camp_list)} camps to {len(result)} using {', '.join(name for name, _ in predicates)}"
    )
    return result
