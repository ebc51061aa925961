"""FastAPI application serving the local vocabulary UI."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wordvault.config import configure_logging, get_settings
from wordvault.constants import BACKUP_REASON_SHUTDOWN
from wordvault.core import container
from wordvault.database import create_schema, dispose_engine, get_session_factory
from wordvault.domain.common.exceptions import DomainError
from wordvault.exceptions import WordVaultError
from wordvault.infrastructure.common.routers import health_router
from wordvault.infrastructure.vocabulary.routers import (
    backup_router,
    review_router,
    words_router,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Load the word list on startup and flush the backup file on shutdown."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)

    get_session_factory()
    create_schema()

    vocabulary_app = container.vocabulary_app()
    await vocabulary_app.load()
    await vocabulary_app.restore_backup_link()
    logger.info("startup_complete", words=vocabulary_app.total_count(), status=vocabulary_app.status)

    try:
        yield
    finally:
        await vocabulary_app.shutdown_backup(BACKUP_REASON_SHUTDOWN)
        dispose_engine()
        logger.info("shutdown_complete")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(WordVaultError)
    async def wordvault_error_handler(_request: Request, exc: WordVaultError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("request_failed", error=exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(DomainError)
    async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": exc.message})

    app.include_router(health_router, prefix=settings.API_V1_PREFIX)
    app.include_router(words_router, prefix=settings.API_V1_PREFIX)
    app.include_router(review_router, prefix=settings.API_V1_PREFIX)
    app.include_router(backup_router, prefix=settings.API_V1_PREFIX)
    return app


app = create_app()
