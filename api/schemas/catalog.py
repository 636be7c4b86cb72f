"""
Pydantic schemas for catalog vocabulary endpoints (interests, weeks).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class InterestListResponse(BaseModel):
    """Deduplicated interest labels, alphabetically ordered."""

    interests: list[str]


class WeekListResponse(BaseModel):
    """Mondays (ISO dates) of the weeks in which sessions start."""

    weeks: list[str]


class CollectionStatus(BaseModel):
    """Reachability of one catalog collection."""

    accessible: bool
    error: str | None = None


class ConnectionReport(BaseModel):
    """Result of probing the catalog collections."""

    success: bool
    message: str
    collections: dict[str, CollectionStatus] = Field(default_factory=dict)
