"""
Pet schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator, model_validator

from adoption_api.core.schemas import INT4_MAX, INT8_MAX, ApiModel
from adoption_api.shelters.schemas import ShelterResponse

PetStatus = Literal["available", "pending", "adopted"]

# Same fallback the web client renders when a pet has no photo.
PLACEHOLDER_IMAGE_URL = "/placeholder-pet.jpg"

# Columns that are NOT NULL in the pets table.
REQUIRED_FIELDS = ("name", "species", "breed", "age", "gender", "size", "images", "status", "shelter_id")


class PetCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    species: str = Field(..., min_length=1, max_length=64)
    breed: str = Field(..., min_length=1, max_length=255)
    # Free text on purpose: "2 years", "6 months".
    age: str = Field(..., min_length=1, max_length=64)
    weight: str | None = Field(default=None, max_length=64)
    gender: str = Field(..., min_length=1, max_length=32)
    size: str = Field(..., min_length=1, max_length=32)
    color: str | None = Field(default=None, max_length=64)
    description: str | None = None
    characteristics: list[str] = Field(default_factory=list)
    images: list[str] = Field(..., min_length=1)
    status: PetStatus = "available"
    shelter_id: int = Field(..., ge=1, le=INT4_MAX)


class PetUpdate(ApiModel):
    """
    Partial update. Only fields present in the request body are written.
    """

    name: str | None = Field(default=None, min_length=1, max_length=255)
    species: str | None = Field(default=None, min_length=1, max_length=64)
    breed: str | None = Field(default=None, min_length=1, max_length=255)
    age: str | None = Field(default=None, min_length=1, max_length=64)
    weight: str | None = Field(default=None, max_length=64)
    gender: str | None = Field(default=None, min_length=1, max_length=32)
    size: str | None = Field(default=None, min_length=1, max_length=32)
    color: str | None = Field(default=None, max_length=64)
    description: str | None = None
    characteristics: list[str] | None = None
    images: list[str] | None = Field(default=None, min_length=1)
    status: PetStatus | None = None
    shelter_id: int | None = Field(default=None, ge=1, le=INT4_MAX)

    @model_validator(mode="after")
    def _required_fields_not_null(self) -> "PetUpdate":
        nulled = sorted(f for f in self.model_fields_set if f in REQUIRED_FIELDS and getattr(self, f) is None)
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class PetFilters(ApiModel):
    species: str | None = None
    size: str | None = None
    location: str | None = None
    search: str | None = None
    status: PetStatus = "available"
    limit: int = Field(default=20, ge=0, le=INT8_MAX)
    offset: int = Field(default=0, ge=0, le=INT8_MAX)

    @field_validator("species", "size", "location", "search", mode="before")
    @classmethod
    def _blank_is_none(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value


class PetResponse(ApiModel):
    id: int
    name: str
    species: str
    breed: str
    age: str
    weight: str | None = None
    gender: str
    size: str
    color: str | None = None
    description: str | None = None
    characteristics: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    status: str
    shelter_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("characteristics", mode="before")
    @classmethod
    def _characteristics_default(cls, value: object) -> object:
        return value if value is not None else []

    @field_validator("images", mode="before")
    @classmethod
    def _images_fallback(cls, value: object) -> object:
        if not value:
            return [PLACEHOLDER_IMAGE_URL]
        return value


class PetWithShelterResponse(PetResponse):
    shelter: ShelterResponse
