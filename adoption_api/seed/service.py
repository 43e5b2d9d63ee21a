"""
Sample data loader.
"""

from __future__ import annotations

import logging

from adoption_api.core.db import Database
from adoption_api.pets import repository as pet_repository
from adoption_api.pets import schemas as pet_schemas
from adoption_api.shelters import repository as shelter_repository
from adoption_api.shelters import schemas as shelter_schemas

from . import data

logger = logging.getLogger(__name__)


async def seed_sample_data(db: Database) -> dict:
    """
    Insert the sample shelter and its pets atomically.
    """
    shelter_payload = shelter_schemas.ShelterCreate.model_validate(data.SAMPLE_SHELTER)

    async with db.transaction() as tx:
        shelter = await shelter_repository.insert_shelter(tx, **shelter_payload.model_dump())
        pet_ids: list[int] = []
        for pet in data.SAMPLE_PETS:
            payload = pet_schemas.PetCreate.model_validate({**pet, "shelter_id": shelter["id"]})
            row = await pet_repository.insert_pet(tx, payload.model_dump())
            pet_ids.append(int(row["id"]))

    logger.info("seed_complete shelter_id=%s pet_count=%s", shelter["id"], len(pet_ids))
    return {
        "message": "Sample data created successfully!",
        "shelterId": int(shelter["id"]),
        "petIds": pet_ids,
    }
