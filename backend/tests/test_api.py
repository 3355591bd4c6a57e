"""Pruebas HTTP de los routers montados en la app."""
import random

import pytest
from fastapi.testclient import TestClient

from rimworld_guides.core.errors import StorageError
from rimworld_guides.db.database import MemoryDatabase, get_db
from rimworld_guides.main import app
from rimworld_guides.services.colonists import ColonistGenerator, get_colonist_generator


class BrokenStore(MemoryDatabase):
    async def fetch_guides(self, query):
        raise StorageError("disk I/O error at /var/secret/rimworld.db")

    async def fetch_guide_by_slug(self, slug):
        raise RuntimeError("SELECT * FROM guides exploded")

    async def initialize(self):
        raise StorageError("read-only filesystem /var/secret")


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_db] = lambda: BrokenStore()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


class TestListGuides:
    def test_pagination_scenario(self, client):
        resp = client.get("/api/guides", params={"limit": 2, "offset": 0})
        assert resp.status_code == 200
        body = resp.json()
        assert [g["slug"] for g in body["guides"]] == ["food-production", "base-defense"]
        assert body["pagination"] == {"total": 3, "limit": 2, "offset": 0, "hasMore": True}

        body = client.get("/api/guides", params={"limit": 2, "offset": 2}).json()
        assert [g["slug"] for g in body["guides"]] == ["getting-started"]
        assert body["pagination"]["hasMore"] is False

    def test_invalid_limit_and_offset_fall_back_to_defaults(self, client):
        resp = client.get("/api/guides", params={"limit": "lots", "offset": "-4"})
        assert resp.status_code == 200
        pagination = resp.json()["pagination"]
        assert pagination["limit"] == 10
        assert pagination["offset"] == 0

    def test_limit_is_clamped(self, client):
        pagination = client.get("/api/guides", params={"limit": 9999}).json()["pagination"]
        assert pagination["limit"] == 100

    def test_filters_and_empty_result(self, client):
        body = client.get("/api/guides", params={"category": "Combat", "difficulty": "Advanced"}).json()
        assert [g["slug"] for g in body["guides"]] == ["base-defense"]

        body = client.get("/api/guides", params={"category": "Combat", "difficulty": "Beginner"}).json()
        assert body == {"guides": [], "pagination": {"total": 0, "limit": 10, "offset": 0, "hasMore": False}}

    def test_tags_are_returned_as_arrays(self, client):
        guides = client.get("/api/guides", params={"search": "getting"}).json()["guides"]
        assert guides[0]["tags"] == ["a", "b", "c"]

    def test_huge_offset_returns_empty_page(self, client):
        resp = client.get("/api/guides", params={"offset": "99999999999999999999"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["guides"] == []
        assert body["pagination"]["total"] == 3
        assert body["pagination"]["offset"] == 2**63 - 1
        assert body["pagination"]["hasMore"] is False

    def test_internal_error_is_generic_500(self, broken_client):
        resp = broken_client.get("/api/guides")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Failed to fetch guides"}
        assert "secret" not in resp.text


class TestGetGuide:
    def test_returns_guide(self, client):
        resp = client.get("/api/guides/getting-started")
        assert resp.status_code == 200
        body = resp.json()
        assert body["slug"] == "getting-started"
        assert body["tags"] == ["a", "b", "c"]
        assert isinstance(body["id"], int)

    def test_unknown_slug_is_404(self, client):
        resp = client.get("/api/guides/nonexistent-slug")
        assert resp.status_code == 404
        assert resp.json() == {"detail": "Guide not found"}

    def test_blank_slug_is_400(self, client):
        resp = client.get("/api/guides/%20")
        assert resp.status_code == 400
        assert resp.json() == {"detail": "Guide slug is required"}

    def test_internal_error_is_generic_500(self, broken_client):
        resp = broken_client.get("/api/guides/anything")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Failed to fetch guide"}
        assert "SELECT" not in resp.text


class TestInitEndpoint:
    def test_init_is_idempotent(self):
        store = MemoryDatabase()
        app.dependency_overrides[get_db] = lambda: store
        try:
            client = TestClient(app)
            first = client.post("/api/db/init").json()
            second = client.post("/api/db/init").json()
        finally:
            app.dependency_overrides.clear()
        assert first["success"] is True and first["seeded"] is True
        assert second["success"] is True and second["seeded"] is False
        assert first["guides"] == second["guides"] > 0

    def test_admin_token_is_enforced_when_configured(self, client, settings_env):
        settings_env.setenv("ADMIN_TOKEN", "s3cret")
        assert client.post("/api/db/init").status_code == 401
        assert client.post("/api/db/init", headers={"X-Admin-Token": "wrong"}).status_code == 401
        resp = client.post("/api/db/init", headers={"X-Admin-Token": "s3cret"})
        assert resp.status_code == 200
        assert resp.json()["success"] is True

    def test_init_failure_is_generic_500(self, broken_client):
        resp = broken_client.post("/api/db/init")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Failed to initialize database"}


class TestColonists:
    @pytest.fixture
    def colonist_client(self):
        app.dependency_overrides[get_colonist_generator] = lambda: ColonistGenerator(random.Random(7))
        try:
            yield TestClient(app)
        finally:
            app.dependency_overrides.clear()

    def test_generates_requested_count_with_unique_names(self, colonist_client):
        resp = colonist_client.get("/api/colonists", params={"count": 5})
        assert resp.status_code == 200
        names = [c["name"] for c in resp.json()]
        assert len(names) == 5
        assert len(set(names)) == 5

    @pytest.mark.parametrize("count", [0, -2, 17])
    def test_out_of_range_count_is_400(self, colonist_client, count):
        resp = colonist_client.get("/api/colonists", params={"count": count})
        assert resp.status_code == 400
        assert "count" in resp.json()["detail"]

    def test_non_integer_count_is_422(self, colonist_client):
        assert colonist_client.get("/api/colonists", params={"count": "many"}).status_code == 422

    def test_incident_and_reference(self, colonist_client):
        event = colonist_client.get("/api/colonists/incident").json()
        reference = colonist_client.get("/api/colonists/reference").json()
        assert event["incident"] in reference["incidents"]
        assert event["base_name"] in reference["base_names"]
        assert len(reference["colonist_names"]) == 16


def test_health_check():
    assert TestClient(app).get("/").json() == {"status": "ok"}
