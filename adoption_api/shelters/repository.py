"""
Shelter persistence (raw SQL).
"""

from __future__ import annotations

from decimal import Decimal

from adoption_api.core.db import Queries, fits_int4

SHELTER_COLUMNS = (
    "id, name, location, address, phone, email, website, rating, review_count, created_at"
)


async def list_shelters(db: Queries) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {SHELTER_COLUMNS}
        FROM shelters
        ORDER BY name ASC, id ASC
        """
    )


async def get_shelter(db: Queries, shelter_id: int) -> dict | None:
    if not fits_int4(shelter_id):
        return None
    return await db.fetch_one(
        f"""
        SELECT {SHELTER_COLUMNS}
        FROM shelters
        WHERE id = $1
        """,
        shelter_id,
    )


async def insert_shelter(
    db: Queries,
    *,
    name: str,
    location: str,
    address: str | None = None,
    phone: str | None = None,
    email: str | None = None,
    website: str | None = None,
    rating: Decimal | None = None,
    review_count: int = 0,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO shelters (name, location, address, phone, email, website, rating, review_count)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
        RETURNING {SHELTER_COLUMNS}
        """,
        name,
        location,
        address,
        phone,
        email,
        website,
        rating,
        review_count,
    )
    if row is None:
        raise RuntimeError("Failed to insert shelter.")
    return row
