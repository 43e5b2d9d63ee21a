"""
Shelter API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from adoption_api.core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.get("/shelters")
async def list_shelters(db: Database = Depends(get_db)) -> list[schemas.ShelterResponse]:
    return await service.list_shelters(db)


@router.get("/shelters/{shelter_id}")
async def get_shelter(shelter_id: int, db: Database = Depends(get_db)) -> schemas.ShelterResponse:
    return await service.get_shelter(db, shelter_id)
