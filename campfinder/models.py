"""
Domain models for camp discovery.

Catalog records (Camp, CampSession, InterestTag) are read-only snapshots of
what the catalog collaborator returned. FilterCriteria, SavedSessionRef and
SavedSet are built per request and thrown away afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TimeOfDay(Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    FULL_DAY = "full-day"


@dataclass(frozen=True)
class InterestTag:
    """A topical label attached to a camp.

    `tag` and `interest_name` are two spellings of the same concept; either
    may be missing.
    """

    id: str | None = None
    tag: str | None = None
    interest_name: str | None = None

    @property
    def labels(self) -> tuple[str, ...]:
        """Distinct non-blank trimmed values of both columns, tag first."""
        result: list[str] = []
        for value in (self.tag, self.interest_name):
            if value and value.strip() and value.strip() not in result:
                result.append(value.strip())
        return tuple(result)


@dataclass(frozen=True)
class CampSession:
    """A scheduled offering of a camp.

    Dates and times stay as the catalog's strings ("2025-06-10", "09:00:00");
    campfinder.schedule parses them when a predicate needs them.
    """

    id: str | None = None
    camp_id: str | None = None
    name: str | None = None
    label: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    days_of_week: tuple[str, ...] = ()
    min_age: int | None = None
    max_age: int | None = None
    price: float | None = None
    capacity: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass(frozen=True)
class Camp:
    id: str
    name: str
    location: str | None = None
    description: str | None = None
    website_url: str | None = None
    zipcode_id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    sessions: tuple[CampSession, ...] = ()
    interests: tuple[InterestTag, ...] = ()
    interest_labels: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def with_interests(cls, interests: tuple[InterestTag, ...], **kwargs: object) -> Camp:
        """Build a camp whose interest_labels are derived from its tag rows."""
        labels = frozenset(label for tag in interests for label in tag.labels)
        return cls(interests=interests, interest_labels=labels, **kwargs)  # type: ignore[arg-type]


@dataclass(frozen=True)
class SavedSessionRef:
    """Schedule fields of a session the caller already saved."""

    id: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    days_of_week: tuple[str, ...] = ()

    @classmethod
    def from_session(cls, session: CampSession) -> SavedSessionRef:
        return cls(
            id=session.id,
            start_date=session.start_date,
            end_date=session.end_date,
            start_time=session.start_time,
            end_time=session.end_time,
            days_of_week=session.days_of_week,
        )


@dataclass(frozen=True)
class FilterCriteria:
    """
    Caller-supplied filter bag. Every field is optional; an absent or empty
    field disables its predicate.

    Attributes:
        age: Child's age in whole years
        interests: Interest labels, match-any
        date_range_start / date_range_end: ISO dates bounding the wanted period
        week: Single ISO date that must fall inside a session
        days_of_week: Weekday names, match-any
        time_of_day: Session time bucket
        zipcode / max_distance: Accepted but not applied (no geocoder yet)
        min_price / max_price: Inclusive price bounds
        hide_conflicts: Drop camps clashing with the caller's saved sessions
        child_id: Key used to look up saved sessions for one child
    """

    age: int | None = None
    interests: frozenset[str] = field(default_factory=frozenset)
    date_range_start: str | None = None
    date_range_end: str | None = None
    week: str | None = None
    days_of_week: frozenset[str] = field(default_factory=frozenset)
    time_of_day: TimeOfDay | None = None
    zipcode: str | None = None
    max_distance: float | None = None
    min_price: float | None = None
    max_price: float | None = None
    hide_conflicts: bool = False
    child_id: str | None = None

    def is_empty(self) -> bool:
        return self == FilterCriteria()
