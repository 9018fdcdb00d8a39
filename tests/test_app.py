"""
Records API - Application Wiring Tests
======================================

What we test:
    ✅ GET /health reports status, version and mounted resources
    ✅ Unknown paths answer the 404 failure envelope
    ✅ Malformed JSON answers 400
    ✅ X-Request-ID is generated, echoed, or replaced when malformed
    ✅ Access log names the route template and the record id
    ✅ create_app() mounts only the requested resource routers
    ✅ Settings reject unknown resource names and bad log levels
"""

import logging
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import ValidationError as PydanticValidationError

from records_api import __version__
from records_api.config import KNOWN_RESOURCES, Settings
from records_api.database import get_db_session
from records_api.main import create_app
from records_api.middleware.request_id import resolve_request_id


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_resources(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == __version__
        assert body["resources"] == list(KNOWN_RESOURCES)
        assert body["uptime_seconds"] >= 0


class TestEnvelopes:

    @pytest.mark.asyncio
    async def test_unknown_path_returns_404_envelope(self, client):
        response = await client.get("/api/nothing-here")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["msg"]

    @pytest.mark.asyncio
    async def test_malformed_json_returns_400(self, client):
        response = await client.post(
            "/api/author",
            content=b'{"name": ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "msg": "Request body is not valid JSON",
        }


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generates_request_id(self, client):
        response = await client.get("/api/authors")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_echoes_client_request_id(self, client):
        response = await client.get("/api/authors", headers={"X-Request-ID": "trace-42"})

        assert response.headers["X-Request-ID"] == "trace-42"

    @pytest.mark.asyncio
    async def test_replaces_malformed_client_request_id(self, client):
        response = await client.get(
            "/api/authors", headers={"X-Request-ID": "forged entry; level=INFO"}
        )

        rid = response.headers["X-Request-ID"]
        assert rid != "forged entry; level=INFO"
        assert len(rid) == 8

    @pytest.mark.parametrize("value", [None, "", "a" * 65, "has space", "semi;colon"])
    def test_resolve_generates_for_unusable_values(self, value):
        assert len(resolve_request_id(value)) == 8

    @pytest.mark.parametrize("value", ["trace-42", "abc.DEF_123", "a" * 64])
    def test_resolve_keeps_well_formed_values(self, value):
        assert resolve_request_id(value) == value


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_logs_route_template_and_record_id(self, client, caplog):
        caplog.set_level(logging.INFO, logger="records_api.access")
        missing_id = str(uuid4())

        await client.delete(f"/api/author/{missing_id}")

        records = [r for r in caplog.records if r.name == "records_api.access"]
        assert len(records) == 1
        record = records[0]
        assert record.route == "/api/author/{author_id}"
        assert record.record_id == missing_id
        assert record.status == 404
        assert record.levelno == logging.WARNING

    @pytest.mark.asyncio
    async def test_list_route_has_no_record_id(self, client, caplog):
        caplog.set_level(logging.INFO, logger="records_api.access")

        await client.get("/api/authors")

        record = [r for r in caplog.records if r.name == "records_api.access"][0]
        assert record.route == "/api/authors"
        assert record.record_id is None
        assert record.levelno == logging.INFO

    @pytest.mark.asyncio
    async def test_health_is_not_logged(self, client, caplog):
        caplog.set_level(logging.INFO, logger="records_api.access")

        await client.get("/health")

        assert not [r for r in caplog.records if r.name == "records_api.access"]


class TestResourceSelection:

    @pytest.mark.asyncio
    async def test_reduced_app_mounts_only_authors_and_books(self, test_session_factory):
        app = create_app(["authors", "books"])

        async def override_get_db_session():
            async with test_session_factory() as session:
                yield session
                await session.commit()

        app.dependency_overrides[get_db_session] = override_get_db_session

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            assert (await c.get("/api/authors")).status_code == 200
            assert (await c.get("/api/books")).status_code == 200
            assert (await c.get("/api/products")).status_code == 404
            assert (await c.post("/api/student", json={})).status_code == 404
            health = (await c.get("/health")).json()

        assert health["resources"] == ["authors", "books"]

    def test_unknown_resource_rejected_by_factory(self):
        with pytest.raises(ValueError):
            create_app(["authors", "magazines"])


class TestSettings:

    def test_enabled_resources_in_canonical_order(self):
        settings = Settings(enabled_resources="books, Authors")

        assert settings.enabled_resources_list == ["authors", "books"]

    def test_unknown_resource_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(enabled_resources="authors,magazines")

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="LOUD")

    def test_log_level_uppercased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"
