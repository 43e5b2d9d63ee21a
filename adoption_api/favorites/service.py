"""
Favorites business logic.

Re-adding an existing favorite is a no-op that reports the existing row;
removing a missing favorite is a no-op too.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from adoption_api.core.db import Database
from adoption_api.core.errors import missing_reference

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_favorites(db: Database, user_id: str) -> list[schemas.FavoriteWithPetResponse]:
    rows = await repository.list_favorites(db, user_id)
    return [schemas.FavoriteWithPetResponse.model_validate(row) for row in rows]


async def add_favorite(db: Database, user_id: str, pet_id: int) -> tuple[schemas.FavoriteResponse, bool]:
    """
    Returns (favorite, created). `created` is False when the pair already existed.
    """
    try:
        row = await repository.insert_favorite(db, user_id=user_id, pet_id=pet_id)
    except asyncpg.ForeignKeyViolationError as exc:
        raise missing_reference(exc) from exc

    if row is not None:
        logger.info("favorite_added user_id=%s pet_id=%s", user_id, pet_id)
        return schemas.FavoriteResponse.model_validate(row), True

    existing = await repository.get_favorite(db, user_id=user_id, pet_id=pet_id)
    if existing is None:
        # Lost a race with a concurrent unfavorite.
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Favorite changed concurrently. Retry the request.",
        )
    logger.info("favorite_exists user_id=%s pet_id=%s", user_id, pet_id)
    return schemas.FavoriteResponse.model_validate(existing), False


async def remove_favorite(db: Database, user_id: str, pet_id: int) -> schemas.FavoriteRemovedResponse:
    removed = await repository.delete_favorite(db, user_id=user_id, pet_id=pet_id)
    if removed:
        logger.info("favorite_removed user_id=%s pet_id=%s", user_id, pet_id)
    return schemas.FavoriteRemovedResponse()


async def is_favorite(db: Database, user_id: str, pet_id: int) -> schemas.FavoriteCheckResponse:
    found = await repository.is_favorite(db, user_id=user_id, pet_id=pet_id)
    return schemas.FavoriteCheckResponse(is_favorite=found)
