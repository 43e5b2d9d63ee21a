"""
Favorites API endpoints. All routes require a session.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from adoption_api.auth import dependencies as auth_dependencies
from adoption_api.core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.get("/favorites")
async def list_favorites(
    user_id: str = Depends(auth_dependencies.get_current_user_id),
    db: Database = Depends(get_db),
) -> list[schemas.FavoriteWithPetResponse]:
    return await service.list_favorites(db, user_id)


@router.post("/favorites", status_code=status.HTTP_201_CREATED)
async def add_favorite(
    request: schemas.FavoriteCreate,
    response: Response,
    user_id: str = Depends(auth_dependencies.get_current_user_id),
    db: Database = Depends(get_db),
) -> schemas.FavoriteResponse:
    """
    201 when the favorite was created, 200 when it already existed.
    """
    favorite, created = await service.add_favorite(db, user_id, request.pet_id)
    if not created:
        response.status_code = status.HTTP_200_OK
    return favorite


@router.delete("/favorites/{pet_id}")
async def remove_favorite(
    pet_id: int,
    user_id: str = Depends(auth_dependencies.get_current_user_id),
    db: Database = Depends(get_db),
) -> schemas.FavoriteRemovedResponse:
    return await service.remove_favorite(db, user_id, pet_id)


@router.get("/favorites/{pet_id}/check")
async def check_favorite(
    pet_id: int,
    user_id: str = Depends(auth_dependencies.get_current_user_id),
    db: Database = Depends(get_db),
) -> schemas.FavoriteCheckResponse:
    return await service.is_favorite(db, user_id, pet_id)
