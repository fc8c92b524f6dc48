"""
pytest_patterns.api.app

FastAPI app factory.

Responsibilities:
- Build the FastAPI application and register routers.
- Initialize and dispose the DB engine/session factory in the lifespan.
- Map domain errors to HTTP responses.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_404_NOT_FOUND, HTTP_409_CONFLICT

from pytest_patterns import __version__
from pytest_patterns.api.routers.health import router as health_router
from pytest_patterns.api.routers.items import router as items_router
from pytest_patterns.db.init_db import init_db
from pytest_patterns.db.session import create_engine, create_sessionmaker
from pytest_patterns.errors import OutOfStockError, UnknownItemError
from pytest_patterns.observability.logging import configure_logging, get_logger
from pytest_patterns.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name, level=settings.log_level, json=settings.log_json
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(title="pytest-patterns inventory", version=__version__, lifespan=lifespan)
    app.include_router(health_router, tags=["health"])
    app.include_router(items_router)

    @app.exception_handler(UnknownItemError)
    async def _unknown_item(_: Request, exc: UnknownItemError) -> JSONResponse:
        return JSONResponse(status_code=HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(OutOfStockError)
    async def _out_of_stock(_: Request, exc: OutOfStockError) -> JSONResponse:
        return JSONResponse(
            status_code=HTTP_409_CONFLICT,
            content={"detail": str(exc), "available": exc.available},
        )

    @app.exception_handler(ValueError)
    async def _invalid_value(_: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    return app


# --- Module Notes -----------------------------------------------------------
# Exception handlers are resolved by MRO, so OutOfStockError (a ValueError) still
# maps to 409 rather than 422.
