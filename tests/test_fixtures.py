"""
Shared test fixtures and utilities for the NutriBreak test suite.

Every fixture builds its own SQLite in-memory database, so tests never share
state and need no running server.
"""

import uuid
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, Environment
from domain.models import Database, User
from repositories import PersistenceContext
from main import create_app

SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


def make_settings(**overrides) -> Settings:
    """Testing settings backed by an in-memory database"""
    values = dict(
        environment=Environment.TESTING,
        database_url=SQLITE_MEMORY_URL,
        db_init_attempts=1,
        db_init_delay_sec=0,
        log_level="WARNING",
    )
    values.update(overrides)
    return Settings(**values)


def fresh_context(database: Database) -> PersistenceContext:
    """A second, independent unit of work over the same database"""
    return PersistenceContext(database.new_session())


@pytest.fixture(scope="function")
def database() -> Generator[Database, None, None]:
    """Empty schema in a private in-memory SQLite database"""
    db = Database(SQLITE_MEMORY_URL)
    db.init_database()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture(scope="function")
def db_context(database: Database) -> Generator[PersistenceContext, None, None]:
    """
    Persistence context for repository and service tests.

    Yields:
        PersistenceContext bound to a new session on ``database``
    """
    with PersistenceContext(database.new_session()) as ctx:
        yield ctx


@pytest.fixture(scope="function")
def saved_user(db_context: PersistenceContext) -> User:
    """A saved user that meals and breaks can belong to"""
    user = User(name="Test User", email="test@test.com")
    db_context.users.add(user)
    db_context.save()
    return user


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """TestClient over a freshly built app; the lifespan creates the schema"""
    app = create_app(make_settings())
    with TestClient(app) as test_client:
        yield test_client
