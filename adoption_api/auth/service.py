"""
Auth business logic.

The identity provider owns credentials. This service only turns a verified
identity token into a server-side session and resolves sessions back to the
provider's stable subject id.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from adoption_api.core import oidc
from adoption_api.core.db import Database
from adoption_api.users import service as user_service

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def unauthorized() -> HTTPException:
    # The web client matches on "401: ...Unauthorized" to send users to login.
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


async def start_session(db: Database, payload: schemas.SessionRequest) -> tuple[str, schemas.SessionResponse]:
    """
    Verify the identity token, upsert the user, and open a session.
    Returns (session_id, response body).
    """
    try:
        claims = await oidc.verify_identity_token(payload.id_token)
        profile = security.user_from_claims(claims)
    except (oidc.OidcError, security.AuthSecurityError) as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    user = await user_service.upsert_user(db, profile)

    purged = await repository.purge_expired_sessions(db)
    sid = security.build_session_id()
    await repository.create_session(
        db,
        sid=sid,
        sess=security.session_payload(claims),
        ttl_hours=security.session_ttl_hours(),
    )
    logger.info("session_created user_id=%s purged_expired=%s", user.id, purged)
    return sid, schemas.SessionResponse(user=user)


async def end_session(db: Database, sid: str | None) -> schemas.LogoutResponse:
    if sid:
        deleted = await repository.delete_session(db, sid)
        if deleted:
            logger.info("session_deleted")
    return schemas.LogoutResponse(ok=True)


async def user_id_for_session(db: Database, sid: str | None) -> str:
    raw = (sid or "").strip()
    if not raw:
        raise unauthorized()

    user_id = await repository.get_session_user_id(db, raw)
    if user_id is None:
        raise unauthorized()
    return user_id
