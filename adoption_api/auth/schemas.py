"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import Field

from adoption_api.core.schemas import ApiModel
from adoption_api.users.schemas import UserResponse


class SessionRequest(ApiModel):
    # Identity token issued by the external OpenID Connect provider.
    id_token: str = Field(..., min_length=20)


class SessionResponse(ApiModel):
    user: UserResponse


class LogoutResponse(ApiModel):
    ok: bool = True
