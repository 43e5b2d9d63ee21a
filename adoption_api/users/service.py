"""
User business logic.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from adoption_api.core.db import Database

from . import repository, schemas

logger = logging.getLogger(__name__)


async def upsert_user(db: Database, payload: schemas.UserUpsert) -> schemas.UserResponse:
    """
    Insert-or-update keyed by the identity provider's subject id.
    """
    try:
        row = await repository.upsert_user(
            db,
            user_id=payload.id,
            email=payload.email,
            first_name=payload.first_name,
            last_name=payload.last_name,
            profile_image_url=payload.profile_image_url,
            location=payload.location,
        )
    except asyncpg.UniqueViolationError as exc:
        # users.email is unique; another identity already claimed it.
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email is already registered to another user.",
        ) from exc

    logger.info("user_upserted user_id=%s", payload.id)
    return schemas.UserResponse.model_validate(row)


async def get_user(db: Database, user_id: str) -> schemas.UserResponse:
    row = await repository.get_user_by_id(db, user_id)
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found.",
        )
    return schemas.UserResponse.model_validate(row)
