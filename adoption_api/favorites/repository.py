"""
Favorite persistence (raw SQL).

(user_id, pet_id) is the primary key of `favorites`; the database, not the
application, decides whether a favorite already exists.
"""

from __future__ import annotations

from typing import Any

from adoption_api.core.db import Queries, affected_rows, fits_int4, nest_prefixed
from adoption_api.pets.repository import pet_select

PET_PREFIX = "p__"


async def list_favorites(db: Queries, user_id: str) -> list[dict[str, Any]]:
    """
    User's favorites joined with their pets, newest first.
    """
    rows = await db.fetch_all(
        f"""
        SELECT f.user_id, f.pet_id, f.created_at, {pet_select("p", PET_PREFIX)}
        FROM favorites f
        JOIN pets p ON p.id = f.pet_id
        WHERE f.user_id = $1
        ORDER BY f.created_at DESC, f.pet_id DESC
        """,
        user_id,
    )
    return [nest_prefixed(row, PET_PREFIX, "pet") for row in rows]


async def insert_favorite(db: Queries, *, user_id: str, pet_id: int) -> dict[str, Any] | None:
    """
    Insert the pair. Returns the new row, or None when it already existed.
    """
    return await db.fetch_one(
        """
        INSERT INTO favorites (user_id, pet_id)
        VALUES ($1, $2)
        ON CONFLICT (user_id, pet_id) DO NOTHING
        RETURNING user_id, pet_id, created_at
        """,
        user_id,
        pet_id,
    )


async def get_favorite(db: Queries, *, user_id: str, pet_id: int) -> dict[str, Any] | None:
    if not fits_int4(pet_id):
        return None
    return await db.fetch_one(
        """
        SELECT user_id, pet_id, created_at
        FROM favorites
        WHERE user_id = $1
          AND pet_id = $2
        """,
        user_id,
        pet_id,
    )


async def delete_favorite(db: Queries, *, user_id: str, pet_id: int) -> bool:
    if not fits_int4(pet_id):
        return False
    status = await db.execute(
        """
        DELETE FROM favorites
        WHERE user_id = $1
          AND pet_id = $2
        """,
        user_id,
        pet_id,
    )
    return affected_rows(status) > 0


async def is_favorite(db: Queries, *, user_id: str, pet_id: int) -> bool:
    if not fits_int4(pet_id):
        return False
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM favorites
        WHERE user_id = $1
          AND pet_id = $2
        LIMIT 1
        """,
        user_id,
        pet_id,
    )
    return row is not None
