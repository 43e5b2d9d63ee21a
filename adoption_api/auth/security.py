"""
Auth security helpers.
"""

from __future__ import annotations

import secrets
from typing import Any

from adoption_api.core import config
from adoption_api.users.schemas import UserUpsert


class AuthSecurityError(RuntimeError):
    pass


def session_cookie_name() -> str:
    return config.env_str("SESSION_COOKIE_NAME", "sid")


def session_ttl_hours() -> int:
    hours = config.env_int("SESSION_TTL_HOURS", 24 * 7)
    return hours if hours > 0 else 24 * 7


def session_cookie_secure() -> bool:
    return config.env_bool("SESSION_COOKIE_SECURE", False)


def build_session_id() -> str:
    # URL-safe random string, stored verbatim as sessions.sid.
    return secrets.token_urlsafe(32)


def _claim(claims: dict[str, Any], *names: str) -> str | None:
    for name in names:
        value = claims.get(name)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def user_from_claims(claims: dict[str, Any]) -> UserUpsert:
    """
    Map identity-token claims onto the user profile we keep.
    """
    subject = _claim(claims, "sub")
    if subject is None:
        raise AuthSecurityError("Identity token has no subject.")

    return UserUpsert(
        id=subject,
        email=_claim(claims, "email"),
        first_name=_claim(claims, "first_name", "given_name"),
        last_name=_claim(claims, "last_name", "family_name"),
        profile_image_url=_claim(claims, "profile_image_url", "picture"),
    )


def session_payload(claims: dict[str, Any]) -> dict[str, Any]:
    """
    Content stored in sessions.sess.
    """
    kept = {k: claims[k] for k in ("sub", "email", "iss", "exp") if k in claims}
    return {"user_id": str(claims["sub"]), "claims": kept}
