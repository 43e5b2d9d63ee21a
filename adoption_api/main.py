"""
FastAPI application.

Run with:
    uvicorn adoption_api.main:app --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from adoption_api.admin import router as admin_router
from adoption_api.applications import router as applications_router
from adoption_api.auth import router as auth_router
from adoption_api.core import config
from adoption_api.core.db import Database
from adoption_api.core.errors import unhandled_exception_handler
from adoption_api.core.log import configure_logging
from adoption_api.favorites import router as favorites_router
from adoption_api.pets import router as pets_router
from adoption_api.seed import router as seed_router
from adoption_api.shelters import router as shelters_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def create_app(database: Database | None = None) -> FastAPI:
    """
    Build the app. `database` is normally built from DATABASE_URL at startup;
    pass one in to share a pool or to substitute a fake in tests.
    """
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One database handle per process, shared by every request.
        db = database if database is not None else Database.from_env()
        await db.connect()
        app.state.db = db
        logger.info("startup_complete")
        try:
            yield
        finally:
            await db.close()
            logger.info("shutdown_complete")

    app = FastAPI(title="Pet Adoption API", version="1.0.0", lifespan=lifespan)

    # Allow the web client's dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(pets_router.router, prefix=API_PREFIX, tags=["pets"])
    app.include_router(shelters_router.router, prefix=API_PREFIX, tags=["shelters"])
    app.include_router(favorites_router.router, prefix=API_PREFIX, tags=["favorites"])
    app.include_router(applications_router.router, prefix=API_PREFIX, tags=["applications"])
    app.include_router(auth_router.router, prefix=API_PREFIX, tags=["auth"])
    app.include_router(admin_router.router, prefix=API_PREFIX, tags=["admin"])
    app.include_router(seed_router.router, prefix=API_PREFIX, tags=["seed"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "pet adoption api"}

    return app


app = create_app()
