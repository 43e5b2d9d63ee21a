# =============================================================================
# tests/test_applications.py - Adoption application tests
# =============================================================================
# Applicant endpoints plus the review state machine in the service layer.
#
# Run with: pytest tests/test_applications.py -v
# =============================================================================

import asyncpg
import pytest
from fastapi import HTTPException

from adoption_api.applications import service
from tests.fakes import USER_ID, FakeDatabase, application_row, pet_row, prefixed

INSERT_SQL = "INSERT INTO applications"
GET_SQL = "FROM applications WHERE id = $1"
TRANSITION_SQL = "UPDATE applications"
LIST_SQL = "FROM applications a JOIN pets p"


class TestCreateApplication:
    def test_requires_session(self, client):
        resp = client.post("/api/applications", json={"petId": 1})

        assert resp.status_code == 401

    def test_created_as_pending(self, auth_client, fake_db):
        fake_db.on(INSERT_SQL, application_row(id=11, pet_id=3))

        resp = auth_client.post(
            "/api/applications",
            json={
                "petId": 3,
                "message": "We have a big garden.",
                "contactInfo": {"phone": "0400 000 000"},
                "experienceInfo": {"previousPets": True},
            },
        )

        assert resp.status_code == 201
        body = resp.json()
        assert body["id"] == 11
        assert body["status"] == "pending"
        assert body["contactInfo"] == {"phone": "0400 000 000"}
        assert fake_db.args_for(INSERT_SQL) == (
            USER_ID,
            3,
            "We have a big garden.",
            {"phone": "0400 000 000"},
            {"previousPets": True},
        )

    def test_user_id_comes_from_session_not_body(self, auth_client, fake_db):
        fake_db.on(INSERT_SQL, application_row())

        auth_client.post("/api/applications", json={"petId": 1, "userId": "someone-else"})

        assert fake_db.args_for(INSERT_SQL)[0] == USER_ID

    def test_unknown_pet_is_404(self, auth_client, fake_db):
        exc = asyncpg.ForeignKeyViolationError("violates foreign key constraint")
        exc.constraint_name = "applications_pet_id_fkey"
        fake_db.on(INSERT_SQL, exc)

        resp = auth_client.post("/api/applications", json={"petId": 42})

        assert resp.status_code == 404
        assert resp.json() == {"detail": "Pet not found."}

    def test_unknown_user_is_404(self, auth_client, fake_db):
        exc = asyncpg.ForeignKeyViolationError("violates foreign key constraint")
        exc.constraint_name = "applications_user_id_fkey"
        fake_db.on(INSERT_SQL, exc)

        resp = auth_client.post("/api/applications", json={"petId": 42})

        assert resp.status_code == 404
        assert resp.json() == {"detail": "User not found."}

    def test_pet_id_beyond_integer_range_is_422(self, auth_client, fake_db):
        resp = auth_client.post("/api/applications", json={"petId": 3_000_000_000})

        assert resp.status_code == 422
        assert fake_db.queries(INSERT_SQL) == []

    def test_contact_info_must_be_an_object(self, auth_client):
        resp = auth_client.post("/api/applications", json={"petId": 1, "contactInfo": "call me"})

        assert resp.status_code == 422


class TestListApplications:
    def test_lists_with_pet(self, auth_client, fake_db):
        fake_db.on(LIST_SQL, [{**application_row(), **prefixed(pet_row(), "p__")}])

        resp = auth_client.get("/api/applications")

        assert resp.status_code == 200
        body = resp.json()
        assert body[0]["status"] == "pending"
        assert body[0]["pet"]["name"] == "Buddy"


# =============================================================================
# Status lifecycle (service layer)
# =============================================================================

class TestUpdateApplicationStatus:
    async def test_pending_to_approved(self):
        db = FakeDatabase()
        db.on(GET_SQL, application_row(status="pending"))
        db.on(TRANSITION_SQL, application_row(status="approved"))

        result = await service.update_application_status(db, 10, "approved")

        assert result.status == "approved"
        assert db.args_for(TRANSITION_SQL) == (10, "pending", "approved")

    async def test_same_status_is_noop(self):
        db = FakeDatabase()
        db.on(GET_SQL, application_row(status="rejected"))

        result = await service.update_application_status(db, 10, "rejected")

        assert result.status == "rejected"
        assert db.queries(TRANSITION_SQL) == []

    @pytest.mark.parametrize(
        "current, target",
        [("approved", "rejected"), ("rejected", "approved"), ("approved", "pending")],
    )
    async def test_terminal_states_cannot_change(self, current, target):
        db = FakeDatabase()
        db.on(GET_SQL, application_row(status=current))

        with pytest.raises(HTTPException) as exc_info:
            await service.update_application_status(db, 10, target)

        assert exc_info.value.status_code == 409
        assert db.queries(TRANSITION_SQL) == []

    async def test_unknown_status_is_422(self):
        db = FakeDatabase()

        with pytest.raises(HTTPException) as exc_info:
            await service.update_application_status(db, 10, "withdrawn")

        assert exc_info.value.status_code == 422
        assert db.calls == []

    async def test_missing_application_is_404(self):
        db = FakeDatabase()

        with pytest.raises(HTTPException) as exc_info:
            await service.update_application_status(db, 10, "approved")

        assert exc_info.value.status_code == 404

    async def test_out_of_range_id_is_404_without_query(self):
        db = FakeDatabase()

        with pytest.raises(HTTPException) as exc_info:
            await service.update_application_status(db, 3_000_000_000, "approved")

        assert exc_info.value.status_code == 404
        assert db.calls == []

    async def test_lost_race_is_409(self):
        db = FakeDatabase()
        db.on(GET_SQL, application_row(status="pending"))
        db.on(TRANSITION_SQL, None)

        with pytest.raises(HTTPException) as exc_info:
            await service.update_application_status(db, 10, "rejected")

        assert exc_info.value.status_code == 409
