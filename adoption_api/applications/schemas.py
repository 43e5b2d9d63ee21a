"""
Adoption application schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from adoption_api.core.schemas import INT4_MAX, ApiModel
from adoption_api.pets.schemas import PetResponse

ApplicationStatus = Literal["pending", "approved", "rejected"]

APPLICATION_STATUSES: tuple[str, ...] = ("pending", "approved", "rejected")

# pending -> approved | rejected; both are terminal.
ALLOWED_TRANSITIONS: dict[str, frozenset[str]] = {
    "pending": frozenset({"approved", "rejected"}),
    "approved": frozenset(),
    "rejected": frozenset(),
}


class ApplicationCreate(ApiModel):
    pet_id: int = Field(..., ge=1, le=INT4_MAX)
    message: str | None = Field(default=None, max_length=5000)
    # Semi-structured blobs (phone, preferred contact, previous pets, housing...).
    contact_info: dict[str, Any] | None = None
    experience_info: dict[str, Any] | None = None


class ApplicationStatusUpdate(ApiModel):
    status: ApplicationStatus


class ApplicationResponse(ApiModel):
    id: int
    user_id: str
    pet_id: int
    status: str
    message: str | None = None
    contact_info: dict[str, Any] | None = None
    experience_info: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ApplicationWithPetResponse(ApplicationResponse):
    pet: PetResponse
