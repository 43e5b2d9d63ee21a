"""
Sample-data endpoint (admin only).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from adoption_api.admin import dependencies as admin_dependencies
from adoption_api.core.db import Database, get_db

from . import service

router = APIRouter()


@router.post(
    "/seed",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(admin_dependencies.require_admin)],
)
async def seed(db: Database = Depends(get_db)) -> dict:
    return await service.seed_sample_data(db)
