"""
Adoption application API endpoints. All routes require a session.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from adoption_api.auth import dependencies as auth_dependencies
from adoption_api.core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.get("/applications")
async def list_applications(
    user_id: str = Depends(auth_dependencies.get_current_user_id),
    db: Database = Depends(get_db),
) -> list[schemas.ApplicationWithPetResponse]:
    return await service.list_applications(db, user_id)


@router.post("/applications", status_code=status.HTTP_201_CREATED)
async def create_application(
    request: schemas.ApplicationCreate,
    user_id: str = Depends(auth_dependencies.get_current_user_id),
    db: Database = Depends(get_db),
) -> schemas.ApplicationResponse:
    return await service.create_application(db, user_id, request)
