"""
Adoption application business logic.

Status lifecycle: pending -> approved | rejected. Only an external reviewer
moves it (see the admin routes); applicants only create.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from adoption_api.core.db import Database
from adoption_api.core.errors import missing_reference

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_applications(db: Database, user_id: str) -> list[schemas.ApplicationWithPetResponse]:
    rows = await repository.list_applications(db, user_id)
    return [schemas.ApplicationWithPetResponse.model_validate(row) for row in rows]


async def create_application(
    db: Database,
    user_id: str,
    payload: schemas.ApplicationCreate,
) -> schemas.ApplicationResponse:
    # The pet's availability is not re-checked here; the client disables the
    # action for unavailable pets.
    try:
        row = await repository.insert_application(
            db,
            user_id=user_id,
            pet_id=payload.pet_id,
            message=payload.message,
            contact_info=payload.contact_info,
            experience_info=payload.experience_info,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        raise missing_reference(exc) from exc

    logger.info("application_created application_id=%s user_id=%s pet_id=%s", row["id"], user_id, payload.pet_id)
    return schemas.ApplicationResponse.model_validate(row)


async def get_application(db: Database, application_id: int) -> schemas.ApplicationResponse:
    row = await repository.get_application(db, application_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found.")
    return schemas.ApplicationResponse.model_validate(row)


async def update_application_status(
    db: Database,
    application_id: int,
    new_status: str,
) -> schemas.ApplicationResponse:
    """
    Move an application along its lifecycle.

    Re-applying the current status is a no-op. Leaving a terminal status is
    a 409; an unknown status is a 422.
    """
    if new_status not in schemas.APPLICATION_STATUSES:
        raise HTTPException(
            status_code=422,
            detail=f"Invalid status '{new_status}'. Allowed: {list(schemas.APPLICATION_STATUSES)}",
        )

    current = await get_application(db, application_id)
    if current.status == new_status:
        return current

    if new_status not in schemas.ALLOWED_TRANSITIONS.get(current.status, frozenset()):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Application is already {current.status}; cannot change it to {new_status}.",
        )

    row = await repository.transition_status(
        db,
        application_id,
        from_status=current.status,
        to_status=new_status,
    )
    if row is None:
        # Another reviewer got there first.
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Application status changed concurrently. Reload and retry.",
        )

    logger.info(
        "application_status_changed application_id=%s from=%s to=%s",
        application_id,
        current.status,
        new_status,
    )
    return schemas.ApplicationResponse.model_validate(row)
