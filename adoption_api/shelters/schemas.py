"""
Shelter schemas.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from adoption_api.core.schemas import INT4_MAX, ApiModel


class ShelterCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., min_length=1, max_length=255)
    address: str | None = None
    phone: str | None = Field(default=None, max_length=64)
    email: str | None = Field(default=None, max_length=320)
    website: str | None = Field(default=None, max_length=2048)
    # numeric(2,1): one fractional digit, 0.0 - 9.9 in storage; ratings are out of 5.
    rating: Decimal | None = Field(default=None, ge=0, le=5, max_digits=2, decimal_places=1)
    review_count: int = Field(default=0, ge=0, le=INT4_MAX)


class ShelterResponse(ApiModel):
    id: int
    name: str
    location: str
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    rating: Decimal | None = None
    review_count: int | None = 0
    created_at: datetime | None = None
