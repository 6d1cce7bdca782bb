"""
detective_api.api.app

FastAPI app factory for the Detective Case API.

Responsibilities:
- Build the FastAPI application and register routers, middleware and error handlers.
- Open the store connection once, before any request is served, and dispose it on shutdown.
- Serve the OpenAPI description and Swagger UI.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from detective_api import __version__
from detective_api.api.errors import register_exception_handlers
from detective_api.api.routers.cases import router as cases_router
from detective_api.api.routers.detectives import router as detectives_router
from detective_api.api.routers.evidences import router as evidences_router
from detective_api.api.routers.health import router as health_router
from detective_api.db.init_db import init_db, seed_detective
from detective_api.db.session import create_engine, create_sessionmaker, ping
from detective_api.observability.logging import configure_logging, get_logger
from detective_api.observability.middleware import RequestContextMiddleware
from detective_api.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine = create_engine(settings)
        try:
            # Fail startup rather than accept requests against an unreachable store.
            await ping(engine)
            if settings.db_synchronize:
                await init_db(engine)

            app.state.engine = engine
            app.state.sessionmaker = create_sessionmaker(engine)
            if settings.seed_bootstrap_detective:
                await seed_detective(
                    app.state.sessionmaker,
                    detective_id=settings.bootstrap_detective_id,
                    name=settings.bootstrap_detective_name,
                )
            log.info("startup", env=settings.env, port=settings.api_port)
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Detective Case API",
        description="Detectives, their cases and the evidence filed against them.",
        version=__version__,
        docs_url="/api-docs",
        openapi_url="/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(detectives_router)
    app.include_router(cases_router)
    app.include_router(evidences_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Handlers reach the engine only through `api.deps`; nothing here is a module-level singleton.
