# =============================================================================
# tests/test_core.py - Cross-cutting helper tests
# =============================================================================
# Config parsing, DB helpers, shelters listing, error envelope, lifespan.
#
# Run with: pytest tests/test_core.py -v
# =============================================================================

import pytest
from fastapi.testclient import TestClient

from adoption_api.core import config, db
from adoption_api.main import create_app
from tests.fakes import FakeDatabase, shelter_row


class TestConfig:
    def test_env_int_falls_back_on_garbage(self, monkeypatch):
        monkeypatch.setenv("SESSION_TTL_HOURS", "soon")
        assert config.env_int("SESSION_TTL_HOURS", 5) == 5

    @pytest.mark.parametrize("raw, expected", [("true", True), ("0", False), ("maybe", True)])
    def test_env_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv("SESSION_COOKIE_SECURE", raw)
        assert config.env_bool("SESSION_COOKIE_SECURE", True) is expected

    def test_cors_origins_list(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
        assert config.cors_origins() == ["https://a.example", "https://b.example"]

    def test_cors_origins_default(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        assert "http://localhost:5173" in config.cors_origins()


class TestDbHelpers:
    def test_database_url_required(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(RuntimeError):
            db.database_url()

    def test_sslmode_is_stripped(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host:5432/app?sslmode=require&application_name=x")
        assert db.database_url() == "postgresql://u:p@host:5432/app?application_name=x"

    @pytest.mark.parametrize("tag, expected", [("DELETE 3", 3), ("UPDATE 0", 0), ("", 0)])
    def test_affected_rows(self, tag, expected):
        assert db.affected_rows(tag) == expected

    def test_nest_prefixed(self):
        row = {"id": 1, "p__id": 2, "p__name": "Max"}
        assert db.nest_prefixed(row, "p__", "pet") == {"id": 1, "pet": {"id": 2, "name": "Max"}}

    @pytest.mark.parametrize(
        "value, expected",
        [(1, True), (2_147_483_647, True), (2_147_483_648, False), (-2_147_483_648, True), (-2_147_483_649, False)],
    )
    def test_fits_int4(self, value, expected):
        assert db.fits_int4(value) is expected

    def test_queries_is_abstract(self):
        with pytest.raises(TypeError):
            db.Queries()

    def test_pool_must_be_connected(self):
        database = db.Database("postgresql://localhost/none")
        with pytest.raises(RuntimeError):
            database.pool


class TestShelters:
    def test_list_shelters(self, client, fake_db):
        fake_db.on("FROM shelters ORDER BY name", [shelter_row(), shelter_row(id=2, name="Paws Place", rating=None)])

        resp = client.get("/api/shelters")

        assert resp.status_code == 200
        body = resp.json()
        assert [s["name"] for s in body] == ["Hills Animal Rescue", "Paws Place"]
        assert body[1]["rating"] is None

    def test_missing_shelter_is_404(self, client):
        resp = client.get("/api/shelters/5")

        assert resp.status_code == 404

    def test_shelter_id_beyond_integer_range_is_404(self, client, fake_db):
        resp = client.get("/api/shelters/3000000000")

        assert resp.status_code == 404
        assert fake_db.queries("FROM shelters") == []


class TestApp:
    def test_lifespan_connects_and_closes(self):
        fake = FakeDatabase()
        with TestClient(create_app(database=fake)) as test_client:
            assert fake.connected
            assert test_client.get("/health").json() == {"status": "ok"}
        assert fake.closed

    def test_store_failure_is_generic_500(self):
        fake = FakeDatabase().on("FROM shelters", ConnectionError("connection refused to 10.0.0.5"))
        app = create_app(database=fake)

        with TestClient(app, raise_server_exceptions=False) as test_client:
            resp = test_client.get("/api/shelters")

        assert resp.status_code == 500
        assert resp.json() == {"detail": "Internal server error"}
