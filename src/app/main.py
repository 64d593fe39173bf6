"""
Application factory.

    uvicorn app.main:app

Startup installs logging; shutdown flushes the logging queue and disposes
the database engine.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from app.api.v1.error_handlers import register_exception_handlers
from app.api.v1.router import api_router
from app.config import Settings, get_settings
from app.core.logging import RequestIDMiddleware, setup_logging, stop_queue_logging
from app.database.session import dispose_engine
from app.utils.pyproject import get_project_version

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    setup_logging(settings)
    logger.info("app.startup", extra={"env": settings.ENV, "api_prefix": settings.API_PREFIX})

    yield

    logger.info("app.shutdown")
    await dispose_engine()
    stop_queue_logging()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        version=get_project_version(),
        description="Warehouse management API: sellers, products, sections, orders and their reports.",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/ping", response_class=PlainTextResponse, include_in_schema=False)
    async def ping() -> str:
        return "pong"

    return app


app = create_app()
