"""
Session persistence helpers.

Rows live in `sessions(sid, sess jsonb, expire)`; expired rows are invisible
to lookups and purged opportunistically.
"""

from __future__ import annotations

from typing import Any

from adoption_api.core.db import Queries, affected_rows


async def create_session(db: Queries, *, sid: str, sess: dict[str, Any], ttl_hours: int) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO sessions (sid, sess, expire)
        VALUES ($1, $2::jsonb, now() + make_interval(hours => $3))
        RETURNING sid, expire
        """,
        sid,
        sess,
        ttl_hours,
    )
    if row is None:
        raise RuntimeError("Failed to create session.")
    return row


async def get_session_user_id(db: Queries, sid: str) -> str | None:
    row = await db.fetch_one(
        """
        SELECT sess->>'user_id' AS user_id
        FROM sessions
        WHERE sid = $1
          AND expire > now()
        """,
        sid,
    )
    if row is None:
        return None
    return row.get("user_id") or None


async def delete_session(db: Queries, sid: str) -> bool:
    status = await db.execute("DELETE FROM sessions WHERE sid = $1", sid)
    return affected_rows(status) > 0


async def purge_expired_sessions(db: Queries) -> int:
    status = await db.execute("DELETE FROM sessions WHERE expire <= now()")
    return affected_rows(status)
