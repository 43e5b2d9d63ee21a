"""
User schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from adoption_api.core.schemas import ApiModel


class UserUpsert(ApiModel):
    id: str = Field(..., min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=320)
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    profile_image_url: str | None = Field(default=None, max_length=2048)
    # None keeps whatever location the user already has.
    location: str | None = Field(default=None, max_length=255)


class UserResponse(ApiModel):
    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    location: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
