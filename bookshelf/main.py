"""Bookshelf API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BookshelfError → {"error": message} responses
    - CORS configured from settings (not hardcoded)
    - One DatabaseSessionManager and one BookStore per process, built in the
      lifespan and kept on app.state; routes reach them through dependencies

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema created on startup when configured (idempotent), Alembic for managed deploys
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookshelf.api.error_handlers import register_error_handlers
from bookshelf.api.routes import books, health, process_url
from bookshelf.config import get_settings
from bookshelf.infrastructure.database import DatabaseSessionManager
from bookshelf.infrastructure.observability import (
    REQUEST_ID_HEADER, request_logging_middleware, setup_logging,
)
from bookshelf.services.book_store import BookStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
        sqlite_busy_timeout=settings.sqlite_busy_timeout_seconds,
    )
    if settings.create_schema_on_startup:
        await db_manager.create_schema()
    app.state.db_manager = db_manager
    app.state.book_store = BookStore(
        db_manager, timeout_seconds=settings.store_timeout_seconds,
    )
    logger.info("Bookshelf API started")
    yield
    logger.info("Bookshelf API shutting down")
    await db_manager.dispose()


app = FastAPI(
    title="Bookshelf API",
    description="Books CRUD and URL processor service",
    version="1.0.0",
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Accept", "Authorization", "Content-Type", REQUEST_ID_HEADER],
    expose_headers=[REQUEST_ID_HEADER],
    max_age=300,
)
app.middleware("http")(request_logging_middleware)

app.include_router(health.router)
app.include_router(books.router)
app.include_router(process_url.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run("bookshelf.main:app", host=settings.api_host, port=settings.api_port)
