"""
API Services - Catalog access and request decoding for the Camp Finder API.

Services encapsulate the PocketBase collaborator and query-parameter handling
so routers stay thin wrappers around the campfinder engine.
"""

from .catalog_repository import (
    CatalogRepository,
    CatalogUnavailableError,
    camp_from_record,
    interest_from_record,
    session_from_record,
)
from .criteria import criteria_from_query
from .saved_sessions import SavedSessionLookup

__all__ = [
    # Repository
    "CatalogRepository",
    "CatalogUnavailableError",
    "camp_from_record",
    "interest_from_record",
    "session_from_record",
    # Request decoding
    "criteria_from_query",
    # Saved sessions
    "SavedSessionLookup",
]
