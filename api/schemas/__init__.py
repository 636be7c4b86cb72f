"""
Pydantic schemas for the Camp Finder API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .camps import (
    CampDetailResponse,
    CampListResponse,
    CampResponse,
    CampSaveResponse,
    CampSessionResponse,
    InterestTagResponse,
)
from .catalog import (
    CollectionStatus,
    ConnectionReport,
    InterestListResponse,
    WeekListResponse,
)
from .sessions import (
    SessionCampSummary,
    SessionListResponse,
    SessionSaveResponse,
    SessionWithCampResponse,
)

__all__ = [
    # Camps
    "CampDetailResponse",
    "CampListResponse",
    "CampResponse",
    "CampSaveResponse",
    "CampSessionResponse",
    "InterestTagResponse",
    # Catalog
    "CollectionStatus",
    "ConnectionReport",
    "InterestListResponse",
    "WeekListResponse",
    # Sessions
    "SessionCampSummary",
    "SessionListResponse",
    "SessionSaveResponse",
    "SessionWithCampResponse",
]
