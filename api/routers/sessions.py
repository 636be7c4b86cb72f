"""
Sessions Router - Session lookup by id and save/unsave endpoints.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import get_catalog_repository
from ..schemas import SessionListResponse, SessionSaveResponse, SessionWithCampResponse
from ..services.catalog_repository import CatalogRepository, CatalogUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["sessions"])

Repository = Annotated[CatalogRepository, Depends(get_catalog_repository)]


@router.get("", response_model=SessionListResponse)
async def list_sessions(
    repository: Repository,
    id: Annotated[list[str] | None, Query(description="Session id, repeatable")] = None,
) -> SessionListResponse:
    """Get sessions (with their camp) by id, ordered by start date."""
    session_ids = [sid for sid in (id or []) if sid.strip()]
    if not session_ids:
        return SessionListResponse(sessions=[])

    try:
        pairs = await repository.get_sessions(session_ids)
    except CatalogUnavailableError as e:
        logger.error(f"Catalog unavailable while loading sessions: {e}")
        raise HTTPException(status_code=500, detail="Unable to load sessions")

    return SessionListResponse(sessions=[SessionWithCampResponse.from_pair(s, camp) for s, camp in pairs])


async def _require_session(session_id: str, repository: CatalogRepository) -> None:
    try:
        exists = await repository.session_exists(session_id)
    except CatalogUnavailableError as e:
        logger.error(f"Catalog unavailable while checking session {session_id}: {e}")
        raise HTTPException(status_code=500, detail="An error occurred while updating the saved session")
    if not exists:
        raise HTTPException(status_code=404, detail="Session not found")


@router.post("/{session_id}/save", response_model=SessionSaveResponse)
async def save_session(session_id: str, repository: Repository) -> SessionSaveResponse:
    """Acknowledge saving a session. The saved set itself stays on the client."""
    await _require_session(session_id, repository)
    logger.info(f"Session {session_id} saved")
    return SessionSaveResponse(success=True, message="Session saved", sessionId=session_id)


@router.delete("/{session_id}/save", response_model=SessionSaveResponse)
async def unsave_session(session_id: str, repository: Repository) -> SessionSaveResponse:
    """Acknowledge unsaving a session."""
    await _require_session(session_id, repository)
    logger.info(f"Session {session_id} unsaved")
    return SessionSaveResponse(success=True, message="Session unsaved", sessionId=session_id)
