"""
Catalog Router - Vocabulary endpoints feeding the filter panel.

- /api/interests: deduplicated interest labels
- /api/weeks: Mondays of the weeks in which sessions start
- /api/test-connection: reachability of the catalog collections
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from campfinder.interests import extract_interest_vocabulary
from campfinder.weeks import available_weeks

from ..dependencies import get_catalog_repository
from ..schemas import CollectionStatus, ConnectionReport, InterestListResponse, WeekListResponse
from ..services.catalog_repository import CatalogRepository, CatalogUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["catalog"])

Repository = Annotated[CatalogRepository, Depends(get_catalog_repository)]


@router.get("/interests", response_model=InterestListResponse)
async def list_interests(repository: Repository) -> InterestListResponse:
    """All interest labels, case-insensitively deduplicated and sorted."""
    try:
        tags = await repository.list_interest_tags()
    except CatalogUnavailableError as e:
        logger.error(f"Catalog unavailable while loading interests: {e}")
        raise HTTPException(status_code=500, detail="Unable to load interests")

    return InterestListResponse(interests=extract_interest_vocabulary(tags))


@router.get("/weeks", response_model=WeekListResponse)
async def list_weeks(repository: Repository) -> WeekListResponse:
    """Week starting dates available for the week filter."""
    try:
        camps = await repository.list_camps()
    except CatalogUnavailableError as e:
        logger.error(f"Catalog unavailable while loading weeks: {e}")
        raise HTTPException(status_code=500, detail="Unable to load weeks")

    return WeekListResponse(weeks=available_weeks(camps))


@router.get("/test-connection", response_model=ConnectionReport)
async def test_connection(repository: Repository) -> ConnectionReport:
    """Probe every catalog collection and report which ones are readable."""
    statuses = await repository.check_collections()
    collections = {name: CollectionStatus(accessible=error is None, error=error) for name, error in statuses.items()}
    success = all(status.accessible for status in collections.values())
    message = "Successfully connected to PocketBase!" if success else "Some catalog collections are not accessible"
    if not success:
        logger.warning(message)
    return ConnectionReport(success=success, message=message, collections=collections)
