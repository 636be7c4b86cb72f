"""
Catalog Repository - Read access to the camp catalog in PocketBase.

This repository handles:
- Fetching camps with their sessions and interest tags
- Translating PocketBase records into campfinder domain objects
- Existence checks used by the save/unsave endpoints

The two-column interest shape (`tag`, `interest_name`) stays on InterestTag;
the filter engine only reads the canonical Camp.interest_labels built here.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections import defaultdict
from collections.abc import Iterable
from typing import Any

from pocketbase import PocketBase
from pocketbase.client import ClientResponseError  # type: ignore[attr-defined]

from campfinder.models import Camp, CampSession, InterestTag

logger = logging.getLogger(__name__)

CAMPS = "camps"
CAMP_SESSIONS = "camp_sessions"
CAMP_INTERESTS = "camp_interests"


class CatalogUnavailableError(Exception):
    """Raised when the catalog cannot be read from PocketBase."""


# ========================================
# Record conversion
# ========================================


def _text(record: Any, field: str) -> str | None:
    value = getattr(record, field, None)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _int(record: Any, field: str, zero_is_missing: bool = False) -> int | None:
    value = getattr(record, field, None)
    if value is None or value == "":
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric {field}={value!r} on record {getattr(record, 'id', '?')}")
        return None
    if zero_is_missing and number <= 0:
        return None
    return number


def _float(record: Any, field: str) -> float | None:
    value = getattr(record, field, None)
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric {field}={value!r} on record {getattr(record, 'id', '?')}")
        return None


def _days(record: Any) -> tuple[str, ...]:
    """Read days_of_week stored as a list, a JSON array string or a comma-separated string."""
    value = getattr(record, "days_of_week", None)
    if not value:
        return ()
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("["):
            try:
                value = json.loads(text)
            except json.JSONDecodeError:
                value = text.strip("[]").split(",")
        else:
            value = text.split(",")
    return tuple(str(day).strip().strip('"') for day in value if str(day).strip())


def _relation_id(record: Any, field: str) -> str | None:
    value = getattr(record, field, None)
    if isinstance(value, list):
        value = value[0] if value else None
    return str(value) if value else None


def session_from_record(record: Any) -> CampSession:
    # PocketBase returns 0 for an unset number field; max_age 0 means "no bound"
    return CampSession(
        id=_text(record, "id"),
        camp_id=_relation_id(record, "camp"),
        name=_text(record, "name"),
        label=_text(record, "label"),
        start_date=_text(record, "start_date"),
        end_date=_text(record, "end_date"),
        start_time=_text(record, "start_time"),
        end_time=_text(record, "end_time"),
        days_of_week=_days(record),
        min_age=_int(record, "min_age"),
        max_age=_int(record, "max_age", zero_is_missing=True),
        price=_float(record, "price"),
        capacity=_int(record, "capacity"),
        created_at=_text(record, "created") or _text(record, "created_at"),
        updated_at=_text(record, "updated") or _text(record, "updated_at"),
    )


def interest_from_record(record: Any) -> InterestTag:
    return InterestTag(
        id=_text(record, "id"),
        tag=_text(record, "tag"),
        interest_name=_text(record, "interest_name"),
    )


def camp_from_record(
    record: Any,
    sessions: Iterable[CampSession] = (),
    interests: Iterable[InterestTag] = (),
) -> Camp:
    return Camp.with_interests(
        tuple(interests),
        id=str(record.id),
        name=_text(record, "name") or "",
        location=_text(record, "location"),
        description=_text(record, "description"),
        website_url=_text(record, "website_url"),
        zipcode_id=_relation_id(record, "zipcode_id"),
        created_at=_text(record, "created") or _text(record, "created_at"),
        updated_at=_text(record, "updated") or _text(record, "updated_at"),
        sessions=tuple(sessions),
    )


def id_filter(ids: Iterable[str], field: str = "id") -> str:
    return " || ".join(f'{field} = "{escape_filter_value(item)}"' for item in ids)


def escape_filter_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


# ========================================
# Repository
# ========================================


class CatalogRepository:
    """Reads camps, sessions and interest tags from PocketBase."""

    def __init__(self, pb_client: PocketBase):
        self.pb = pb_client

    async def _full_list(self, collection: str, query_params: dict[str, Any]) -> list[Any]:
        try:
            return await asyncio.to_thread(
                self.pb.collection(collection).get_full_list,
                query_params=query_params,
            )
        except ClientResponseError as e:
            logger.error(f"PocketBase error reading {collection}: {e}")
            raise CatalogUnavailableError(f"Unable to read {collection}") from e

    async def list_camps(self) -> list[Camp]:
        """All camps sorted by name, each with its sessions and interest tags."""
        camp_records, session_records, interest_records = await asyncio.gather(
            self._full_list(CAMPS, {"sort": "name"}),
            self._full_list(CAMP_SESSIONS, {"sort": "start_date"}),
            self._full_list(CAMP_INTERESTS, {"sort": "interest_name"}),
        )

        sessions_by_camp: defaultdict[str, list[CampSession]] = defaultdict(list)
        for record in session_records:
            session = session_from_record(record)
            if session.camp_id:
                sessions_by_camp[session.camp_id].append(session)

        interests_by_camp: defaultdict[str, list[InterestTag]] = defaultdict(list)
        for record in interest_records:
            camp_id = _relation_id(record, "camp")
            if camp_id:
                interests_by_camp[camp_id].append(interest_from_record(record))

        camps = [
            camp_from_record(record, sessions_by_camp.get(str(record.id), ()), interests_by_camp.get(str(record.id), ()))
            for record in camp_records
        ]
        logger.info(
            f"Loaded catalog: {len(camps)} camps, {len(session_records)} sessions, {len(interest_records)} interest tags"
        )
        return camps

    async def get_camp(self, camp_id: str) -> Camp | None:
        """A single camp with its sessions and tags, or None if it does not exist."""
        try:
            record = await asyncio.to_thread(self.pb.collection(CAMPS).get_one, camp_id)
        except ClientResponseError as e:
            if getattr(e, "status", None) == 404:
                return None
            logger.error(f"PocketBase error reading camp {camp_id}: {e}")
            raise CatalogUnavailableError(f"Unable to read camp {camp_id}") from e

        relation_filter = f'camp = "{escape_filter_value(camp_id)}"'
        session_records, interest_records = await asyncio.gather(
            self._full_list(CAMP_SESSIONS, {"filter": relation_filter, "sort": "start_date"}),
            self._full_list(CAMP_INTERESTS, {"filter": relation_filter, "sort": "interest_name"}),
        )
        return camp_from_record(
            record,
            [session_from_record(r) for r in session_records],
            [interest_from_record(r) for r in interest_records],
        )

    async def get_sessions(self, session_ids: list[str]) -> list[tuple[CampSession, Camp | None]]:
        """Sessions by id, ordered by start date, each paired with its parent camp."""
        if not session_ids:
            return []

        records = await self._full_list(
            CAMP_SESSIONS,
            {"filter": id_filter(session_ids), "sort": "start_date", "expand": "camp"},
        )

        result: list[tuple[CampSession, Camp | None]] = []
        for record in records:
            expand = getattr(record, "expand", None) or {}
            camp_record = expand.get("camp") if isinstance(expand, dict) else getattr(expand, "camp", None)
            camp = camp_from_record(camp_record) if camp_record is not None else None
            result.append((session_from_record(record), camp))
        return result

    async def list_interest_tags(self) -> list[InterestTag]:
        records = await self._full_list(CAMP_INTERESTS, {"sort": "interest_name"})
        return [interest_from_record(r) for r in records]

    async def _exists(self, collection: str, record_id: str) -> bool:
        try:
            await asyncio.to_thread(self.pb.collection(collection).get_one, record_id)
            return True
        except ClientResponseError as e:
            if getattr(e, "status", None) == 404:
                return False
            logger.error(f"PocketBase error checking {collection} {record_id}: {e}")
            raise CatalogUnavailableError(f"Unable to read {collection}") from e

    async def camp_exists(self, camp_id: str) -> bool:
        return await self._exists(CAMPS, camp_id)

    async def session_exists(self, session_id: str) -> bool:
        return await self._exists(CAMP_SESSIONS, session_id)

    async def check_collections(self) -> dict[str, str | None]:
        """Probe each catalog collection; maps collection name to an error message or None."""
        statuses: dict[str, str | None] = {}
        for collection in (CAMPS, CAMP_SESSIONS, CAMP_INTERESTS):
            try:
                await asyncio.to_thread(self.pb.collection(collection).get_list, 1, 1)
                statuses[collection] = None
            except Exception as e:
                logger.warning(f"Collection {collection} is not accessible: {e}")
                statuses[collection] = str(e)
        return statuses
