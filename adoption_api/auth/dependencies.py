"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

from fastapi import Depends, Request

from adoption_api.core.db import Database, get_db

from . import security, service


async def get_session_id(request: Request) -> str | None:
    return request.cookies.get(security.session_cookie_name())


async def get_current_user_id(
    session_id: str | None = Depends(get_session_id),
    db: Database = Depends(get_db),
) -> str:
    """
    Stable external user id for the authenticated request, else 401.
    """
    return await service.user_id_for_session(db, session_id)
