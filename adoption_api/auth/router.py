"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from adoption_api.core.db import Database, get_db
from adoption_api.users import schemas as user_schemas
from adoption_api.users import service as user_service

from . import dependencies, schemas, security, service

router = APIRouter()


@router.post("/auth/session")
async def create_session(
    request: schemas.SessionRequest,
    response: Response,
    db: Database = Depends(get_db),
) -> schemas.SessionResponse:
    sid, body = await service.start_session(db, request)
    response.set_cookie(
        key=security.session_cookie_name(),
        value=sid,
        max_age=security.session_ttl_hours() * 3600,
        httponly=True,
        secure=security.session_cookie_secure(),
        samesite="lax",
    )
    return body


@router.post("/auth/logout")
async def logout(
    response: Response,
    session_id: str | None = Depends(dependencies.get_session_id),
    db: Database = Depends(get_db),
) -> schemas.LogoutResponse:
    result = await service.end_session(db, session_id)
    response.delete_cookie(
        key=security.session_cookie_name(),
        httponly=True,
        secure=security.session_cookie_secure(),
        samesite="lax",
    )
    return result


@router.get("/auth/user")
async def current_user(
    user_id: str = Depends(dependencies.get_current_user_id),
    db: Database = Depends(get_db),
) -> user_schemas.UserResponse:
    return await user_service.get_user(db, user_id)
