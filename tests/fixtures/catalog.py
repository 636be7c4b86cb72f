"""
Builders for catalog objects used across the test suite.
"""

from __future__ import annotations

from types import SimpleNamespace

from campfinder.models import Camp, CampSession, InterestTag


def make_record(**fields: object) -> SimpleNamespace:
    """A stand-in for a PocketBase Record: plain attributes, missing ones absent."""
    return SimpleNamespace(**fields)


def make_session(**overrides: object) -> CampSession:
    """A Mon/Wed morning session in mid-June for ages 6-12, priced 75."""
    fields: dict[str, object] = {
        "id": "session-1",
        "camp_id": "camp-1",
        "name": "Week 1",
        "start_date": "2025-06-10",
        "end_date": "2025-06-14",
        "start_time": "09:00",
        "end_time": "12:00",
        "days_of_week": ("Monday", "Wednesday"),
        "min_age": 6,
        "max_age": 12,
        "price": 75.0,
        "capacity": 20,
    }
    fields.update(overrides)
    return CampSession(**fields)  # type: ignore[arg-type]


def make_camp(
    camp_id: str = "camp-1",
    name: str = "Camp One",
    sessions: tuple[CampSession, ...] | list[CampSession] = (),
    tags: tuple[str, ...] | list[str] = (),
    **extra: object,
) -> Camp:
    interests = tuple(InterestTag(id=f"{camp_id}-tag-{i}", tag=t) for i, t in enumerate(tags))
    return Camp.with_interests(interests, id=camp_id, name=name, sessions=tuple(sessions), **extra)
