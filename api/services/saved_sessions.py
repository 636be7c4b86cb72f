"""
Saved Session Lookup - Resolves the caller's saved sessions for conflict checks.

Bookmarks live on the client. A request either sends its saved session ids
directly (`savedSession=...`) or names a child whose saved sessions are kept
in the optional `saved_sessions` collection. Lookup failures never fail the
request: conflict exclusion is simply skipped.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from pocketbase import PocketBase

from campfinder.models import SavedSessionRef

from .catalog_repository import CAMP_SESSIONS, escape_filter_value, id_filter, session_from_record

logger = logging.getLogger(__name__)

SAVED_SESSIONS = "saved_sessions"


class SavedSessionLookup:
    """Fetches schedule data for a caller's saved sessions."""

    def __init__(self, pb_client: PocketBase):
        self.pb = pb_client

    async def fetch(self, child_id: str | None = None, session_ids: Sequence[str] = ()) -> list[SavedSessionRef]:
        """
        Resolve saved sessions for a request.

        Args:
            child_id: Per-child key into the saved_sessions collection
            session_ids: Session ids from the client's own saved set; takes
                precedence over child_id when given

        Returns:
            Saved session references, or an empty list when nothing is saved
            or the lookup fails
        """
        try:
            if session_ids:
                records = await asyncio.to_thread(
                    self.pb.collection(CAMP_SESSIONS).get_full_list,
                    query_params={"filter": id_filter(session_ids)},
                )
                return [SavedSessionRef.from_session(session_from_record(r)) for r in records]

            if child_id:
                records = await asyncio.to_thread(
                    self.pb.collection(SAVED_SESSIONS).get_full_list,
                    query_params={"filter": f'child_id = "{escape_filter_value(child_id)}"', "expand": "session"},
                )
                return [ref for ref in (self._from_saved_record(r) for r in records) if ref is not None]
        except Exception as e:
            logger.warning(f"Saved session lookup failed (child_id={child_id}), skipping conflict check: {e}")
            return []

        return []

    @staticmethod
    def _from_saved_record(record: Any) -> SavedSessionRef | None:
        expand = getattr(record, "expand", None) or {}
        session_record = expand.get("session") if isinstance(expand, dict) else getattr(expand, "session", None)
        if session_record is None:
            logger.debug(f"Saved session {getattr(record, 'id', '?')} has no expanded session")
            return None
        return SavedSessionRef.from_session(session_from_record(session_record))
