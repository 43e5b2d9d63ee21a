"""
Administrative API endpoints: shelter/pet management and application review.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from adoption_api.applications import schemas as application_schemas
from adoption_api.applications import service as application_service
from adoption_api.core.db import Database, get_db
from adoption_api.pets import schemas as pet_schemas
from adoption_api.pets import service as pet_service
from adoption_api.shelters import schemas as shelter_schemas
from adoption_api.shelters import service as shelter_service

from . import dependencies

router = APIRouter(prefix="/admin", dependencies=[Depends(dependencies.require_admin)])


@router.post("/shelters", status_code=status.HTTP_201_CREATED)
async def create_shelter(
    request: shelter_schemas.ShelterCreate,
    db: Database = Depends(get_db),
) -> shelter_schemas.ShelterResponse:
    return await shelter_service.create_shelter(db, request)


@router.post("/pets", status_code=status.HTTP_201_CREATED)
async def create_pet(
    request: pet_schemas.PetCreate,
    db: Database = Depends(get_db),
) -> pet_schemas.PetResponse:
    return await pet_service.create_pet(db, request)


@router.patch("/pets/{pet_id}")
async def update_pet(
    pet_id: int,
    request: pet_schemas.PetUpdate,
    db: Database = Depends(get_db),
) -> pet_schemas.PetResponse:
    return await pet_service.update_pet(db, pet_id, request)


@router.get("/applications/{application_id}")
async def get_application(
    application_id: int,
    db: Database = Depends(get_db),
) -> application_schemas.ApplicationResponse:
    return await application_service.get_application(db, application_id)


@router.patch("/applications/{application_id}/status")
async def update_application_status(
    application_id: int,
    request: application_schemas.ApplicationStatusUpdate,
    db: Database = Depends(get_db),
) -> application_schemas.ApplicationResponse:
    return await application_service.update_application_status(db, application_id, request.status)
