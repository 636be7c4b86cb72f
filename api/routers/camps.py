"""
Camps Router - Camp listing, detail and save/unsave endpoints.

Listing decodes the filter query parameters, loads the catalog, resolves the
caller's saved sessions when conflicts should be hidden, and runs the
campfinder filter engine over the result.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from campfinder.filters import filter_camps
from campfinder.models import SavedSessionRef

from ..dependencies import get_catalog_repository, get_saved_session_lookup
from ..schemas import CampDetailResponse, CampListResponse, CampResponse, CampSaveResponse
from ..services.catalog_repository import CatalogRepository, CatalogUnavailableError
from ..services.criteria import criteria_from_query
from ..services.saved_sessions import SavedSessionLookup
from ..settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/camps", tags=["camps"])

Repository = Annotated[CatalogRepository, Depends(get_catalog_repository)]
Lookup = Annotated[SavedSessionLookup, Depends(get_saved_session_lookup)]


@router.get("", response_model=CampListResponse)
async def list_camps(
    repository: Repository,
    lookup: Lookup,
    age: Annotated[str | None, Query(description="Child's age in years")] = None,
    interest: Annotated[list[str] | None, Query(description="Interest label, repeatable (match-any)")] = None,
    date_range_start: Annotated[str | None, Query(alias="dateRangeStart")] = None,
    date_range_end: Annotated[str | None, Query(alias="dateRangeEnd")] = None,
    week: Annotated[str | None, Query(description="ISO date that must fall inside a session")] = None,
    days_of_week: Annotated[list[str] | None, Query(alias="daysOfWeek")] = None,
    time_of_day: Annotated[str | None, Query(alias="timeOfDay", description="morning, afternoon or full-day")] = None,
    zipcode: Annotated[str | None, Query()] = None,
    max_distance: Annotated[str | None, Query(alias="maxDistance")] = None,
    min_price: Annotated[str | None, Query(alias="minPrice")] = None,
    max_price: Annotated[str | None, Query(alias="maxPrice")] = None,
    hide_conflicts: Annotated[str | None, Query(alias="hideConflicts")] = None,
    child_id: Annotated[str | None, Query(alias="childId")] = None,
    saved_session: Annotated[list[str] | None, Query(alias="savedSession")] = None,
) -> CampListResponse:
    """List camps matching the given filters, ordered by name."""
    criteria = criteria_from_query(
        age=age,
        interests=interest,
        date_range_start=date_range_start,
        date_range_end=date_range_end,
        week=week,
        days_of_week=days_of_week,
        time_of_day=time_of_day,
        zipcode=zipcode,
        max_distance=max_distance,
        min_price=min_price,
        max_price=max_price,
        hide_conflicts=hide_conflicts,
        child_id=child_id,
    )
    logger.debug(f"Camp list criteria: {criteria}")

    try:
        camps = await repository.list_camps()

        saved_sessions: list[SavedSessionRef] = []
        if criteria.hide_conflicts:
            saved_sessions = await lookup.fetch(criteria.child_id, saved_session or [])

        matches = filter_camps(camps, criteria, saved_sessions, default_max_age=get_settings().default_max_age)
        return CampListResponse(camps=[CampResponse.from_domain(camp) for camp in matches])

    except CatalogUnavailableError as e:
        logger.error(f"Catalog unavailable while listing camps: {e}")
        raise HTTPException(status_code=500, detail="Unable to load camps at this time.")
    except Exception as e:
        logger.error(f"Unexpected error listing camps: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail="An unexpected error occurred while loading camps. Please try again later.",
        )


@router.get("/{camp_id}", response_model=CampDetailResponse)
async def get_camp(camp_id: str, repository: Repository) -> CampDetailResponse:
    """Get a single camp with all its sessions and interest tags."""
    try:
        camp = await repository.get_camp(camp_id)
    except CatalogUnavailableError as e:
        logger.error(f"Catalog unavailable while loading camp {camp_id}: {e}")
        raise HTTPException(status_code=500, detail="Unable to load camp details")

    if camp is None:
        raise HTTPException(status_code=404, detail="Camp not found")
    return CampDetailResponse(camp=CampResponse.from_domain(camp))


async def _require_camp(camp_id: str, repository: CatalogRepository) -> None:
    try:
        exists = await repository.camp_exists(camp_id)
    except CatalogUnavailableError as e:
        logger.error(f"Catalog unavailable while checking camp {camp_id}: {e}")
        raise HTTPException(status_code=500, detail="An error occurred while updating the saved camp")
    if not exists:
        raise HTTPException(status_code=404, detail="Camp not found")


@router.post("/{camp_id}/save", response_model=CampSaveResponse)
async def save_camp(camp_id: str, repository: Repository) -> CampSaveResponse:
    """Acknowledge saving a camp. The saved set itself stays on the client."""
    await _require_camp(camp_id, repository)
    logger.info(f"Camp {camp_id} saved")
    return CampSaveResponse(success=True, message="Camp saved", campId=camp_id)


@router.delete("/{camp_id}/save", response_model=CampSaveResponse)
async def unsave_camp(camp_id: str, repository: Repository) -> CampSaveResponse:
    """Acknowledge unsaving a camp."""
    await _require_camp(camp_id, repository)
    logger.info(f"Camp {camp_id} unsaved")
    return CampSaveResponse(success=True, message="Camp unsaved", campId=camp_id)
