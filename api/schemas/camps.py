"""
Pydantic schemas for camp endpoints.

These mirror the catalog's wire shape: a camp carries its sessions under
`camp_sessions` and its tag rows under `camp_interests`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from campfinder.models import Camp, CampSession, InterestTag


class InterestTagResponse(BaseModel):
    """A camp interest row with both label columns."""

    id: str | None = None
    tag: str | None = None
    interest_name: str | None = None

    @classmethod
    def from_domain(cls, tag: InterestTag) -> InterestTagResponse:
        return cls(id=tag.id, tag=tag.tag, interest_name=tag.interest_name)


class CampSessionResponse(BaseModel):
    """A single camp session."""

    id: str | None = None
    camp_id: str | None = None
    name: str | None = None
    label: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    days_of_week: list[str] = Field(default_factory=list)
    min_age: int | None = None
    max_age: int | None = None
    price: float | None = None
    capacity: int | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_domain(cls, session: CampSession) -> CampSessionResponse:
        return cls(
            id=session.id,
            camp_id=session.camp_id,
            name=session.name,
            label=session.label,
            start_date=session.start_date,
            end_date=session.end_date,
            start_time=session.start_time,
            end_time=session.end_time,
            days_of_week=list(session.days_of_week),
            min_age=session.min_age,
            max_age=session.max_age,
            price=session.price,
            capacity=session.capacity,
            created_at=session.created_at,
            updated_at=session.updated_at,
        )


class CampResponse(BaseModel):
    """A camp with its sessions and interest tags."""

    id: str
    name: str
    location: str | None = None
    description: str | None = None
    website_url: str | None = None
    zipcode_id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    camp_sessions: list[CampSessionResponse] = Field(default_factory=list)
    camp_interests: list[InterestTagResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, camp: Camp) -> CampResponse:
        return cls(
            id=camp.id,
            name=camp.name,
            location=camp.location,
            description=camp.description,
            website_url=camp.website_url,
            zipcode_id=camp.zipcode_id,
            created_at=camp.created_at,
            updated_at=camp.updated_at,
            camp_sessions=[CampSessionResponse.from_domain(s) for s in camp.sessions],
            camp_interests=[InterestTagResponse.from_domain(t) for t in camp.interests],
        )


class CampListResponse(BaseModel):
    """Filtered camp list."""

    camps: list[CampResponse]


class CampDetailResponse(BaseModel):
    """Single camp with all related records."""

    camp: CampResponse


class CampSaveResponse(BaseModel):
    """Acknowledgement of a save/unsave action on a camp."""

    success: bool
    message: str
    campId: str
