"""
NutriBreak FastAPI Application
Application factory, startup/shutdown handling and server entry point
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import users, meals, break_records, health
from api.middleware import RequestLoggingMiddleware, register_exception_handlers
from app.config import Settings
from domain.models import Database

_logger = logging.getLogger("nutribreak.main")


def configure_logging(settings: Settings) -> None:
    """Setup logging with configured level and format"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )


def _make_lifespan(settings: Settings, database: Database):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Create the schema on startup, retrying while the database comes up,
        and release the connection pool on shutdown.
        """
        _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

        for attempt in range(1, settings.db_init_attempts + 1):
            try:
                # Run blocking init in a thread to avoid blocking the event loop
                await anyio.to_thread.run_sync(database.init_database)
                _logger.info("Database initialization succeeded")
                break
            except Exception as exc:
                _logger.warning(
                    "Database init attempt %d/%d failed: %s",
                    attempt,
                    settings.db_init_attempts,
                    exc,
                )
                if attempt < settings.db_init_attempts:
                    await anyio.sleep(settings.db_init_delay_sec)
                else:
                    _logger.error(
                        "Database initialization failed after %d attempts", attempt
                    )
                    raise

        try:
            yield
        finally:
            _logger.info(f"Shutting down {settings.app_name}")
            database.dispose()

    return lifespan


def create_app(
    settings: Optional[Settings] = None, database: Optional[Database] = None
) -> FastAPI:
    """
    Build the application from explicit configuration.

    Args:
        settings: application settings, read from the environment when omitted
        database: database to use, built from ``settings.database_url`` when omitted
    """
    settings = settings or Settings()
    database = database or Database(settings.database_url, echo=settings.db_echo)
    configure_logging(settings)

    docs_enabled = settings.docs_enabled
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description=settings.api_description,
        lifespan=_make_lifespan(settings, database),
        debug=settings.debug,
        openapi_url=settings.openapi_url if docs_enabled else None,
        docs_url=settings.docs_url if docs_enabled else None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware, supported_versions=settings.api_version)

    register_exception_handlers(app)

    # Versioned resource routes, unversioned banner and health check
    prefix = settings.versioned_prefix
    app.include_router(users.router, prefix=prefix)
    app.include_router(meals.router, prefix=prefix)
    app.include_router(break_records.router, prefix=prefix)
    app.include_router(health.router)

    return app


def run(settings: Optional[Settings] = None) -> None:
    """Serve an app built from ``settings``, or from the environment when omitted."""
    settings = settings or Settings()
    # the app itself, so uvicorn serves these settings rather than re-reading the environment
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
