"""
Pet browsing API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from adoption_api.core.db import Database, get_db
from adoption_api.core.schemas import INT8_MAX

from . import schemas, service

router = APIRouter()


@router.get("/pets")
async def list_pets(
    species: str | None = Query(default=None, max_length=64),
    size: str | None = Query(default=None, max_length=32),
    location: str | None = Query(default=None, max_length=255),
    search: str | None = Query(default=None, max_length=200),
    status: schemas.PetStatus = Query(default="available"),
    limit: int = Query(20, ge=0, le=INT8_MAX),
    offset: int = Query(0, ge=0, le=INT8_MAX),
    db: Database = Depends(get_db),
) -> list[schemas.PetResponse]:
    """
    List pets, newest first. Only `available` pets unless `status` says otherwise.
    """
    filters = schemas.PetFilters(
        species=species,
        size=size,
        location=location,
        search=search,
        status=status,
        limit=limit,
        offset=offset,
    )
    return await service.list_pets(db, filters)


@router.get("/pets/{pet_id}")
async def get_pet(pet_id: int, db: Database = Depends(get_db)) -> schemas.PetWithShelterResponse:
    return await service.get_pet_with_shelter(db, pet_id)
