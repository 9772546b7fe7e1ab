"""
API dependencies for dependency injection
"""

from typing import Generator
from fastapi import Request

from app.config import Settings
from domain.models import Database
from repositories import PersistenceContext


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Generator[PersistenceContext, None, None]:
    """
    Persistence context dependency for FastAPI routes, one per request.

    Usage:
        @router.get("/example")
        def example(ctx: PersistenceContext = Depends(get_db)):
            # Use ctx.users / ctx.meals / ctx.break_records here
            pass
    """
    database: Database = request.app.state.database
    with PersistenceContext(database.new_session()) as ctx:
        yield ctx


def get_base_path(request: Request) -> str:
    """Versioned prefix used when building hypermedia links"""
    return request.app.state.settings.versioned_prefix
