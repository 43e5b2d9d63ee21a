"""
Pet persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from adoption_api.core.db import Queries, fits_int4, nest_prefixed, select_list
from adoption_api.shelters.repository import SHELTER_COLUMNS

PET_COLUMNS = (
    "id",
    "name",
    "species",
    "breed",
    "age",
    "weight",
    "gender",
    "size",
    "color",
    "description",
    "characteristics",
    "images",
    "status",
    "shelter_id",
    "created_at",
    "updated_at",
)

# Everything an admin may change; id and timestamps are managed here.
UPDATABLE_COLUMNS = tuple(c for c in PET_COLUMNS if c not in ("id", "created_at", "updated_at"))

SHELTER_PREFIX = "s__"


def pet_select(alias: str = "p", prefix: str = "") -> str:
    return select_list(alias, PET_COLUMNS, prefix)


def like_pattern(value: str) -> str:
    """
    Substring pattern for ILIKE with the user's own wildcards escaped.
    """
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


async def list_pets(
    db: Queries,
    *,
    status: str = "available",
    species: str | None = None,
    size: str | None = None,
    location: str | None = None,
    search: str | None = None,
    limit: int = 20,
    offset: int = 0,
) -> list[dict[str, Any]]:
    """
    Filtered pet listing, newest first.

    species/size compare case-insensitively for equality; location is a
    substring of the owning shelter's location; search is a substring of
    name, breed, age or color.
    """
    return await db.fetch_all(
        f"""
        SELECT {pet_select()}
        FROM pets p
        JOIN shelters s ON s.id = p.shelter_id
        WHERE p.status = $1
          AND ($2::text IS NULL OR lower(p.species) = lower($2))
          AND ($3::text IS NULL OR lower(p.size) = lower($3))
          AND ($4::text IS NULL OR s.location ILIKE $4 ESCAPE '\\')
          AND (
            $5::text IS NULL
            OR p.name ILIKE $5 ESCAPE '\\'
            OR p.breed ILIKE $5 ESCAPE '\\'
            OR p.age ILIKE $5 ESCAPE '\\'
            OR p.color ILIKE $5 ESCAPE '\\'
          )
        ORDER BY p.created_at DESC, p.id DESC
        LIMIT $6
        OFFSET $7
        """,
        status,
        species,
        size,
        like_pattern(location) if location else None,
        like_pattern(search) if search else None,
        limit,
        offset,
    )


async def get_pet(db: Queries, pet_id: int) -> dict[str, Any] | None:
    if not fits_int4(pet_id):
        return None
    return await db.fetch_one(
        f"""
        SELECT {pet_select()}
        FROM pets p
        WHERE p.id = $1
        """,
        pet_id,
    )


async def get_pet_with_shelter(db: Queries, pet_id: int) -> dict[str, Any] | None:
    """
    Pet plus its shelter under a nested "shelter" key, or None when either
    side of the join is missing.
    """
    if not fits_int4(pet_id):
        return None
    shelter_columns = [c.strip() for c in SHELTER_COLUMNS.split(",")]
    row = await db.fetch_one(
        f"""
        SELECT {pet_select()}, {select_list("s", shelter_columns, SHELTER_PREFIX)}
        FROM pets p
        JOIN shelters s ON s.id = p.shelter_id
        WHERE p.id = $1
        """,
        pet_id,
    )
    if row is None:
        return None
    return nest_prefixed(row, SHELTER_PREFIX, "shelter")


async def insert_pet(db: Queries, data: dict[str, Any]) -> dict[str, Any]:
    columns = [c for c in UPDATABLE_COLUMNS if c in data]
    placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 1))
    row = await db.fetch_one(
        f"""
        INSERT INTO pets ({", ".join(columns)})
        VALUES ({placeholders})
        RETURNING {", ".join(PET_COLUMNS)}
        """,
        *[data[c] for c in columns],
    )
    if row is None:
        raise RuntimeError("Failed to insert pet.")
    return row


async def update_pet(db: Queries, pet_id: int, changes: dict[str, Any]) -> dict[str, Any] | None:
    """
    Apply a partial update and refresh updated_at.
    Returns the updated row, or None when the pet does not exist.
    """
    if not fits_int4(pet_id):
        return None
    args: list[Any] = [pet_id]
    assignments: list[str] = []
    for column in UPDATABLE_COLUMNS:
        if column in changes:
            args.append(changes[column])
            assignments.append(f"{column} = ${len(args)}")
    assignments.append("updated_at = now()")

    return await db.fetch_one(
        f"""
        UPDATE pets
        SET {", ".join(assignments)}
        WHERE id = $1
        RETURNING {", ".join(PET_COLUMNS)}
        """,
        *args,
    )
