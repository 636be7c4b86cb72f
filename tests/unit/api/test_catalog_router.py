"""Tests for the interests, weeks and test-connection endpoints."""

from __future__ import annotations

from collections.abc import Generator
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.dependencies import get_catalog_repository
from api.routers.catalog import router
from api.services.catalog_repository import CatalogUnavailableError
from campfinder.models import Camp, InterestTag


@pytest.fixture
def repository(sample_camps: list[Camp]) -> AsyncMock:
    repo = AsyncMock()
    repo.list_camps.return_value = sample_camps
    repo.list_interest_tags.return_value = [
        InterestTag(id="1", tag="STEM"),
        InterestTag(id="2", tag="stem"),
        InterestTag(id="3", tag=None, interest_name="Art"),
    ]
    repo.check_collections.return_value = {"camps": None, "camp_sessions": None, "camp_interests": None}
    return repo


@pytest.fixture
def client(repository: AsyncMock) -> Generator[TestClient, None, None]:
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_catalog_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestInterests:
    def test_vocabulary(self, client: TestClient) -> None:
        response = client.get("/api/interests")

        assert response.status_code == 200
        assert response.json() == {"interests": ["Art", "STEM"]}

    def test_catalog_failure_is_500(self, client: TestClient, repository: AsyncMock) -> None:
        repository.list_interest_tags.side_effect = CatalogUnavailableError("down")

        response = client.get("/api/interests")

        assert response.status_code == 500
        assert response.json()["detail"] == "Unable to load interests"


class TestWeeks:
    def test_mondays(self, client: TestClient) -> None:
        assert client.get("/api/weeks").json() == {"weeks": ["2025-06-09", "2025-06-16", "2025-07-07"]}

    def test_catalog_failure_is_500(self, client: TestClient, repository: AsyncMock) -> None:
        repository.list_camps.side_effect = CatalogUnavailableError("down")
        assert client.get("/api/weeks").status_code == 500


class TestConnection:
    def test_all_collections_readable(self, client: TestClient) -> None:
        body = client.get("/api/test-connection").json()

        assert body["success"] is True
        assert body["message"] == "Successfully connected to PocketBase!"
        assert body["collections"]["camps"] == {"accessible": True, "error": None}

    def test_reports_unreadable_collection(self, client: TestClient, repository: AsyncMock) -> None:
        repository.check_collections.return_value = {"camps": None, "camp_sessions": "403 Forbidden"}

        response = client.get("/api/test-connection")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["collections"]["camp_sessions"] == {"accessible": False, "error": "403 Forbidden"}
