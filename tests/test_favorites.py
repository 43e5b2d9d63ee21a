# =============================================================================
# tests/test_favorites.py - Favorites endpoint tests
# =============================================================================
# Session requirement, idempotent add, no-op remove, check, listing.
#
# Run with: pytest tests/test_favorites.py -v
# =============================================================================

import asyncpg
import pytest

from tests.fakes import NOW, USER_ID, pet_row, prefixed

INSERT_SQL = "INSERT INTO favorites"
SELECT_ONE_SQL = "SELECT user_id, pet_id, created_at FROM favorites"
CHECK_SQL = "SELECT 1 AS ok FROM favorites"
LIST_SQL = "FROM favorites f JOIN pets p"


def favorite_row(pet_id: int = 1) -> dict:
    return {"user_id": USER_ID, "pet_id": pet_id, "created_at": NOW}


class TestFavoritesRequireSession:
    @pytest.mark.parametrize(
        "method, path",
        [
            ("get", "/api/favorites"),
            ("post", "/api/favorites"),
            ("delete", "/api/favorites/1"),
            ("get", "/api/favorites/1/check"),
        ],
    )
    def test_no_cookie_is_401(self, client, method, path):
        resp = client.request(method.upper(), path, json={"petId": 1} if method == "post" else None)

        assert resp.status_code == 401
        assert resp.json() == {"detail": "Unauthorized"}

    def test_expired_session_is_401(self, client, fake_db):
        # Lookup filters on expire > now(), so an expired sid finds nothing.
        fake_db.on("sess->>'user_id'", None)
        client.cookies.set("sid", "expired-session")

        resp = client.get("/api/favorites")

        assert resp.status_code == 401


class TestAddFavorite:
    def test_new_favorite_is_201(self, auth_client, fake_db):
        fake_db.on(INSERT_SQL, favorite_row(5))

        resp = auth_client.post("/api/favorites", json={"petId": 5})

        assert resp.status_code == 201
        assert resp.json()["petId"] == 5
        assert resp.json()["userId"] == USER_ID
        assert fake_db.args_for(INSERT_SQL) == (USER_ID, 5)
        assert fake_db.queries(SELECT_ONE_SQL) == []

    def test_existing_favorite_is_200_without_duplicate(self, auth_client, fake_db):
        """ON CONFLICT DO NOTHING returns no row; the existing one is reported."""
        fake_db.on(INSERT_SQL, None).on(SELECT_ONE_SQL, favorite_row(5))

        resp = auth_client.post("/api/favorites", json={"petId": 5})

        assert resp.status_code == 200
        assert resp.json()["petId"] == 5
        assert len(fake_db.queries(INSERT_SQL)) == 1

    def test_unknown_pet_is_404(self, auth_client, fake_db):
        exc = asyncpg.ForeignKeyViolationError("violates foreign key constraint")
        exc.constraint_name = "favorites_pet_id_fkey"
        fake_db.on(INSERT_SQL, exc)

        resp = auth_client.post("/api/favorites", json={"petId": 404})

        assert resp.status_code == 404
        assert resp.json() == {"detail": "Pet not found."}

    def test_concurrent_unfavorite_is_409(self, auth_client, fake_db):
        fake_db.on(INSERT_SQL, None).on(SELECT_ONE_SQL, None)

        resp = auth_client.post("/api/favorites", json={"petId": 5})

        assert resp.status_code == 409

    def test_pet_id_beyond_integer_range_is_422(self, auth_client, fake_db):
        resp = auth_client.post("/api/favorites", json={"petId": 3_000_000_000})

        assert resp.status_code == 422
        assert fake_db.queries(INSERT_SQL) == []

    def test_missing_pet_id_is_422(self, auth_client):
        resp = auth_client.post("/api/favorites", json={})

        assert resp.status_code == 422


class TestRemoveFavorite:
    @pytest.mark.parametrize("status_tag", ["DELETE 1", "DELETE 0"])
    def test_remove_is_always_ok(self, auth_client, fake_db, status_tag):
        fake_db.on("DELETE FROM favorites", status_tag)

        resp = auth_client.delete("/api/favorites/5")

        assert resp.status_code == 200
        assert resp.json() == {"message": "Removed from favorites"}
        assert fake_db.args_for("DELETE FROM favorites") == (USER_ID, 5)

    def test_remove_out_of_range_id_is_noop(self, auth_client, fake_db):
        resp = auth_client.delete("/api/favorites/3000000000")

        assert resp.status_code == 200
        assert resp.json() == {"message": "Removed from favorites"}
        assert fake_db.queries("DELETE FROM favorites") == []


class TestCheckFavorite:
    def test_check_true(self, auth_client, fake_db):
        fake_db.on(CHECK_SQL, {"ok": 1})

        resp = auth_client.get("/api/favorites/5/check")

        assert resp.json() == {"isFavorite": True}

    def test_check_false(self, auth_client):
        resp = auth_client.get("/api/favorites/5/check")

        assert resp.json() == {"isFavorite": False}

    def test_check_out_of_range_id_is_false(self, auth_client, fake_db):
        resp = auth_client.get("/api/favorites/3000000000/check")

        assert resp.status_code == 200
        assert resp.json() == {"isFavorite": False}
        assert fake_db.queries(CHECK_SQL) == []


class TestListFavorites:
    def test_favorites_include_pet(self, auth_client, fake_db):
        fake_db.on(
            LIST_SQL,
            [
                {**favorite_row(2), **prefixed(pet_row(id=2, name="Luna"), "p__")},
                {**favorite_row(1), **prefixed(pet_row(id=1), "p__")},
            ],
        )

        resp = auth_client.get("/api/favorites")

        assert resp.status_code == 200
        body = resp.json()
        assert [f["petId"] for f in body] == [2, 1]
        assert body[0]["pet"]["name"] == "Luna"
        assert fake_db.args_for(LIST_SQL) == (USER_ID,)
