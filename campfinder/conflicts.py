"""Schedule conflict detection between catalog sessions and saved sessions.

Two sessions conflict only when all three hold at once:
- their date ranges overlap
- their times overlap (skipped when either side lacks a start or end time)
- their weekday sets share a day

A missing time on one side therefore never prevents a conflict, while an
empty weekday set always does.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import Camp, CampSession, SavedSessionRef
from .schedule import normalize_weekdays, parse_date, parse_time, ranges_overlap

ScheduledSession = CampSession | SavedSessionRef


def dates_overlap(a: ScheduledSession, b: ScheduledSession) -> bool:
    a_start, a_end = parse_date(a.start_date), parse_date(a.end_date)
    b_start, b_end = parse_date(b.start_date), parse_date(b.end_date)
    if a_start is None or a_end is None or b_start is None or b_end is None:
        return False
    return ranges_overlap(a_start, a_end, b_start, b_end)


def times_overlap(a: ScheduledSession, b: ScheduledSession) -> bool | None:
    """Half-open time overlap, or None when either side has no usable times."""
    a_start, a_end = parse_time(a.start_time), parse_time(a.end_time)
    b_start, b_end = parse_time(b.start_time), parse_time(b.end_time)
    if a_start is None or a_end is None or b_start is None or b_end is None:
        return None
    return a_start < b_end and b_start < a_end


def weekdays_intersect(a: ScheduledSession, b: ScheduledSession) -> bool:
    return bool(normalize_weekdays(a.days_of_week) & normalize_weekdays(b.days_of_week))


def sessions_conflict(a: ScheduledSession, b: ScheduledSession) -> bool:
    if not dates_overlap(a, b):
        return False
    if times_overlap(a, b) is False:
        return False
    return weekdays_intersect(a, b)


def camp_conflicts(camp: Camp, saved_sessions: Sequence[SavedSessionRef]) -> bool:
    """Whether any session of the camp clashes with any saved session."""
    return any(sessions_conflict(session, saved) for session in camp.sessions for saved in saved_sessions)
