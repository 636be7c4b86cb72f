"""
Pydantic schemas for session endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel

from campfinder.models import Camp, CampSession

from .camps import CampSessionResponse


class SessionCampSummary(BaseModel):
    """The parent camp of a session, trimmed to what a session card shows."""

    id: str
    name: str
    location: str | None = None


class SessionWithCampResponse(CampSessionResponse):
    """A session together with its camp summary."""

    camp: SessionCampSummary | None = None

    @classmethod
    def from_pair(cls, session: CampSession, camp: Camp | None) -> SessionWithCampResponse:
        base = CampSessionResponse.from_domain(session)
        summary = SessionCampSummary(id=camp.id, name=camp.name, location=camp.location) if camp else None
        return cls(**base.model_dump(), camp=summary)


class SessionListResponse(BaseModel):
    """Sessions looked up by id."""

    sessions: list[SessionWithCampResponse]


class SessionSaveResponse(BaseModel):
    """Acknowledgement of a save/unsave action on a session."""

    success: bool
    message: str
    sessionId: str
