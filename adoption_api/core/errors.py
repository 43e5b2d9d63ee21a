"""
Error mapping shared by features.

Services raise `HTTPException` for expected failures (validation, not found,
conflicts). Anything else reaches `unhandled_exception_handler`, which logs
the traceback and answers with a generic 500.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def missing_reference(exc: asyncpg.ForeignKeyViolationError) -> HTTPException:
    """
    Map a foreign-key failure on a (user_id, pet_id) row to a 404 naming the
    missing side. Constraint names follow Postgres defaults, e.g.
    `favorites_user_id_fkey`, `applications_pet_id_fkey`.
    """
    constraint = getattr(exc, "constraint_name", None) or ""
    if "user_id" in constraint:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found.")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )
