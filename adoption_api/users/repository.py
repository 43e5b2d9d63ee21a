"""
User persistence helpers.
"""

from __future__ import annotations

from adoption_api.core.db import Queries

USER_COLUMNS = "id, email, first_name, last_name, profile_image_url, location, created_at, updated_at"


def normalize_email(email: str | None) -> str | None:
    value = (email or "").strip().lower()
    return value or None


async def upsert_user(
    db: Queries,
    *,
    user_id: str,
    email: str | None,
    first_name: str | None,
    last_name: str | None,
    profile_image_url: str | None,
    location: str | None = None,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO users (id, email, first_name, last_name, profile_image_url, location)
        VALUES ($1, $2, $3, $4, $5, $6)
        ON CONFLICT (id) DO UPDATE
        SET email = EXCLUDED.email,
            first_name = EXCLUDED.first_name,
            last_name = EXCLUDED.last_name,
            profile_image_url = EXCLUDED.profile_image_url,
            location = COALESCE(EXCLUDED.location, users.location),
            updated_at = now()
        RETURNING {USER_COLUMNS}
        """,
        user_id,
        normalize_email(email),
        first_name,
        last_name,
        profile_image_url,
        location,
    )
    if row is None:
        raise RuntimeError("Failed to upsert user.")
    return row


async def get_user_by_id(db: Queries, user_id: str) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {USER_COLUMNS}
        FROM users
        WHERE id = $1
        """,
        user_id,
    )
