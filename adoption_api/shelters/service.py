"""
Shelter business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from adoption_api.core.db import Database

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_shelters(db: Database) -> list[schemas.ShelterResponse]:
    rows = await repository.list_shelters(db)
    return [schemas.ShelterResponse.model_validate(row) for row in rows]


async def get_shelter(db: Database, shelter_id: int) -> schemas.ShelterResponse:
    row = await repository.get_shelter(db, shelter_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shelter not found.")
    return schemas.ShelterResponse.model_validate(row)


async def create_shelter(db: Database, payload: schemas.ShelterCreate) -> schemas.ShelterResponse:
    row = await repository.insert_shelter(db, **payload.model_dump())
    logger.info("shelter_created shelter_id=%s", row["id"])
    return schemas.ShelterResponse.model_validate(row)
