"""
Pet query and administration logic.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from adoption_api.core.db import Database

from . import repository, schemas

logger = logging.getLogger(__name__)


def _pet_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found.")


def _shelter_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shelter not found.")


async def list_pets(db: Database, filters: schemas.PetFilters) -> list[schemas.PetResponse]:
    rows = await repository.list_pets(
        db,
        status=filters.status,
        species=filters.species,
        size=filters.size,
        location=filters.location,
        search=filters.search,
        limit=filters.limit,
        offset=filters.offset,
    )
    return [schemas.PetResponse.model_validate(row) for row in rows]


async def get_pet(db: Database, pet_id: int) -> schemas.PetResponse:
    row = await repository.get_pet(db, pet_id)
    if row is None:
        raise _pet_not_found()
    return schemas.PetResponse.model_validate(row)


async def get_pet_with_shelter(db: Database, pet_id: int) -> schemas.PetWithShelterResponse:
    row = await repository.get_pet_with_shelter(db, pet_id)
    if row is None:
        raise _pet_not_found()
    return schemas.PetWithShelterResponse.model_validate(row)


async def create_pet(db: Database, payload: schemas.PetCreate) -> schemas.PetResponse:
    try:
        row = await repository.insert_pet(db, payload.model_dump())
    except asyncpg.ForeignKeyViolationError as exc:
        raise _shelter_not_found() from exc

    logger.info("pet_created pet_id=%s shelter_id=%s", row["id"], row["shelter_id"])
    return schemas.PetResponse.model_validate(row)


async def update_pet(db: Database, pet_id: int, payload: schemas.PetUpdate) -> schemas.PetResponse:
    changes = payload.changes()
    try:
        row = await repository.update_pet(db, pet_id, changes)
    except asyncpg.ForeignKeyViolationError as exc:
        raise _shelter_not_found() from exc

    if row is None:
        raise _pet_not_found()

    logger.info("pet_updated pet_id=%s fields=%s", pet_id, ",".join(sorted(changes)) or "-")
    return schemas.PetResponse.model_validate(row)
