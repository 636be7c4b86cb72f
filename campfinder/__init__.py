"""
Camp Finder - Core logic for summer camp discovery.

This package contains:
- models: Domain models (Camp, CampSession, InterestTag, FilterCriteria)
- filters: The camp filter engine
- conflicts: Schedule conflict detection against saved sessions
- interests: Interest vocabulary extraction
- weeks: Week index for the week picker
- saved: Save/unsave toggle for bookmarked camps and sessions
"""

from campfinder.conflicts import camp_conflicts, sessions_conflict
from campfinder.filters import filter_camps
from campfinder.interests import extract_interest_vocabulary
from campfinder.models import (
    Camp,
    CampSession,
    FilterCriteria,
    InterestTag,
    SavedSessionRef,
    TimeOfDay,
)
from campfinder.saved import SavedSet, toggle
from campfinder.weeks import available_weeks

__all__ = [
    "Camp",
    "CampSession",
    "FilterCriteria",
    "InterestTag",
    "SavedSessionRef",
    "SavedSet",
    "TimeOfDay",
    "available_weeks",
    "camp_conflicts",
    "extract_interest_vocabulary",
    "filter_camps",
    "sessions_conflict",
    "toggle",
]
