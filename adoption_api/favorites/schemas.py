"""
Favorite schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from adoption_api.core.schemas import INT4_MAX, ApiModel
from adoption_api.pets.schemas import PetResponse


class FavoriteCreate(ApiModel):
    pet_id: int = Field(..., ge=1, le=INT4_MAX)


class FavoriteResponse(ApiModel):
    user_id: str
    pet_id: int
    created_at: datetime | None = None


class FavoriteWithPetResponse(FavoriteResponse):
    pet: PetResponse


class FavoriteCheckResponse(ApiModel):
    is_favorite: bool


class FavoriteRemovedResponse(ApiModel):
    message: str = "Removed from favorites"
