"""
Adoption application persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from adoption_api.core.db import Queries, fits_int4, nest_prefixed
from adoption_api.pets.repository import pet_select

APPLICATION_COLUMNS = (
    "id, user_id, pet_id, status, message, contact_info, experience_info, created_at, updated_at"
)

PET_PREFIX = "p__"


async def list_applications(db: Queries, user_id: str) -> list[dict[str, Any]]:
    """
    User's applications joined with their pets, newest first.
    """
    rows = await db.fetch_all(
        f"""
        SELECT a.id, a.user_id, a.pet_id, a.status, a.message, a.contact_info,
               a.experience_info, a.created_at, a.updated_at,
               {pet_select("p", PET_PREFIX)}
        FROM applications a
        JOIN pets p ON p.id = a.pet_id
        WHERE a.user_id = $1
        ORDER BY a.created_at DESC, a.id DESC
        """,
        user_id,
    )
    return [nest_prefixed(row, PET_PREFIX, "pet") for row in rows]


async def insert_application(
    db: Queries,
    *,
    user_id: str,
    pet_id: int,
    message: str | None = None,
    contact_info: dict[str, Any] | None = None,
    experience_info: dict[str, Any] | None = None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO applications (user_id, pet_id, message, contact_info, experience_info)
        VALUES ($1, $2, $3, $4::jsonb, $5::jsonb)
        RETURNING {APPLICATION_COLUMNS}
        """,
        user_id,
        pet_id,
        message,
        contact_info,
        experience_info,
    )
    if row is None:
        raise RuntimeError("Failed to insert application.")
    return row


async def get_application(db: Queries, application_id: int) -> dict[str, Any] | None:
    if not fits_int4(application_id):
        return None
    return await db.fetch_one(
        f"""
        SELECT {APPLICATION_COLUMNS}
        FROM applications
        WHERE id = $1
        """,
        application_id,
    )


async def transition_status(
    db: Queries,
    application_id: int,
    *,
    from_status: str,
    to_status: str,
) -> dict[str, Any] | None:
    """
    Compare-and-set on status. None when the row is gone or no longer in
    `from_status`.
    """
    if not fits_int4(application_id):
        return None
    return await db.fetch_one(
        f"""
        UPDATE applications
        SET status = $3,
            updated_at = now()
        WHERE id = $1
          AND status = $2
        RETURNING {APPLICATION_COLUMNS}
        """,
        application_id,
        from_status,
        to_status,
    )
