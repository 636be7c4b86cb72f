"""
Root test configuration and fixtures for Camp Finder.

This conftest.py provides common fixtures for all test categories:
- unit/: Fast, isolated unit tests (engine, services, routers)

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from campfinder.models import Camp  # noqa: E402
from tests.fixtures.catalog import make_camp, make_session  # noqa: E402


def create_mock_pocketbase():
    """Create a mock PocketBase instance whose collections return nothing."""
    mock_pb = Mock()

    mock_collection = Mock()
    mock_collection.auth_with_password = Mock(return_value=True)

    mock_list_response = Mock()
    mock_list_response.items = []
    mock_list_response.total_items = 0

    mock_collection.get_full_list = Mock(return_value=[])
    mock_collection.get_list = Mock(return_value=mock_list_response)
    mock_collection.get_one = Mock()

    mock_pb.collection = Mock(return_value=mock_collection)
    return mock_pb


@pytest.fixture
def mock_pocketbase():
    """Create a mock PocketBase instance for tests that need it."""
    return create_mock_pocketbase()


@pytest.fixture(autouse=True)
def mock_all_external_services():
    """Automatically mock PocketBase so no test opens a real connection.

    Set SKIP_MOCKING=true to run against a live server.
    """
    if os.environ.get("SKIP_MOCKING") == "true":
        yield {}
        return

    mock_pb = create_mock_pocketbase()
    with patch("pocketbase.PocketBase") as mock_pb_class:
        mock_pb_class.return_value = mock_pb
        yield {"pocketbase": mock_pb}


# =============================================================================
# Catalog Fixtures
# =============================================================================


@pytest.fixture
def sample_camps() -> list[Camp]:
    """Three camps sorted by name with distinct ages, schedules, prices and tags."""
    return [
        make_camp(
            "art",
            "Art Camp",
            sessions=[make_session(id="art-1", camp_id="art", min_age=5, max_age=8, price=150.0)],
            tags=["Art"],
        ),
        make_camp(
            "sci",
            "Science Camp",
            sessions=[
                make_session(
                    id="sci-1",
                    camp_id="sci",
                    start_date="2025-07-07",
                    end_date="2025-07-11",
                    start_time="13:00",
                    end_time="16:00",
                    days_of_week=("Tuesday", "Thursday"),
                    min_age=10,
                    max_age=14,
                    price=200.0,
                ),
            ],
            tags=["STEM"],
        ),
        make_camp(
            "sport",
            "Sports Camp",
            sessions=[
                make_session(
                    id="sport-1",
                    camp_id="sport",
                    start_date="2025-06-16",
                    end_date="2025-06-20",
                    start_time="08:30",
                    end_time="17:30",
                    days_of_week=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday"),
                    min_age=None,
                    max_age=None,
                    price=50.0,
                ),
            ],
            tags=["Sports", "Outdoors"],
        ),
    ]
