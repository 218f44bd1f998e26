"""
FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException

from portal_translations.api.v1.router import api_router
from portal_translations.core.config import settings
from portal_translations.core.errors import (
    AppError,
    app_exception_handler,
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from portal_translations.core.logging import RequestIDMiddleware, get_logger, setup_logging
from portal_translations.infra.db import dispose_engine
from portal_translations.infra.redis import close_redis_pool, init_redis_pool

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    await init_redis_pool()
    logger.info(f"Portal translation service starting in {settings.env} mode")

    yield

    # Shutdown
    await close_redis_pool()
    await dispose_engine()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Portal Translations",
        description="Translation cache, queue worker and backfill for the community portal",
        version="0.1.0",
        openapi_url=f"{settings.api_prefix}/openapi.json",
        lifespan=lifespan,
    )

    # Middleware
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=False,
        allow_methods=settings.cors_method_list,
        allow_headers=settings.cors_header_list,
    )

    # Routes
    app.include_router(api_router, prefix=settings.api_prefix)

    # Exception Handlers
    app.add_exception_handler(AppError, app_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    return app


app = create_app()
