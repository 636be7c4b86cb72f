"""
Shared dependencies for the Camp Finder API.

This module provides:
- PocketBase client management (global instance)
- Catalog repository and saved-session lookup factories for FastAPI's Depends
"""

from __future__ import annotations

import asyncio
import logging

from pocketbase import PocketBase

from .services.catalog_repository import CatalogRepository
from .services.saved_sessions import SavedSessionLookup
from .settings import get_settings

logger = logging.getLogger(__name__)

# ========================================
# PocketBase Client
# ========================================

# The catalog is read-only from this service, so one shared client is enough.
_settings = get_settings()
pb_url = _settings.pocketbase_url
pb = PocketBase(pb_url)


async def authenticate_pb() -> None:
    """Authenticate with PocketBase as superuser, when credentials are configured."""
    settings = get_settings()
    if not settings.has_admin_credentials:
        logger.info("No PocketBase admin credentials configured - reading catalog anonymously")
        return
    try:
        await asyncio.to_thread(
            pb.collection("_superusers").auth_with_password,
            settings.pocketbase_admin_email,
            settings.pocketbase_admin_password,
        )
        logger.info("Successfully authenticated with PocketBase")
    except Exception as e:
        logger.error(f"Failed to authenticate with PocketBase: {e}")
        raise


def get_catalog_repository() -> CatalogRepository:
    """FastAPI dependency for camp catalog access."""
    return CatalogRepository(pb)


def get_saved_session_lookup() -> SavedSessionLookup:
    """FastAPI dependency for resolving a caller's saved sessions."""
    return SavedSessionLookup(pb)


__all__ = [
    "pb",
    "pb_url",
    "authenticate_pb",
    "get_catalog_repository",
    "get_saved_session_lookup",
]
