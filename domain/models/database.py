"""
Database configuration and session management.
"""

import logging
import uuid
from typing import Optional
from datetime import datetime, timezone

from sqlalchemy import TIMESTAMP, UUID, Column, create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.types import TypeDecorator
from sqlalchemy.pool import StaticPool

logger = logging.getLogger("nutribreak.database")

# Create SQLAlchemy Base
Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Aware UTC datetime. Naive values are taken to be UTC already."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timestamp column that always reads back as an aware UTC datetime.

    SQLite has no timezone storage, so values are written there as naive UTC and
    get their tzinfo back on load. PostgreSQL keeps the offset natively.
    """

    impl = TIMESTAMP(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        value = as_utc(value)
        if value is not None and dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        return as_utc(value)


class EntityMixin:
    """
    Identity shared by all entities.

    The id is generated when the object is constructed, not at flush time, so a
    staged entity can be looked up before the first save. Equality follows the id.
    """

    id = Column(UUID(as_uuid=True), primary_key=True)

    def __init__(self, **kwargs):
        if kwargs.get("id") is None:
            kwargs["id"] = uuid.uuid4()
        super().__init__(**kwargs)

    def __eq__(self, other):
        if not isinstance(other, EntityMixin):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self):
        return hash((type(self).__name__, self.id))

    def __repr__(self):
        return f"<{type(self).__name__} id={self.id}>"


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _is_sqlite_memory(url: str) -> bool:
    return _is_sqlite(url) and (":memory:" in url or url.rstrip("/").endswith(":"))


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class Database:
    """Engine and session factory built from an explicit database URL."""

    def __init__(self, url: str, echo: bool = False):
        engine_kwargs = {"echo": echo, "future": True}
        if _is_sqlite(url):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if _is_sqlite_memory(url):
                # one shared connection, otherwise every checkout sees an empty database
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        self.url = url
        self.engine = create_engine(url, **engine_kwargs)
        if _is_sqlite(url):
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        # Writes happen only in PersistenceContext.save()
        self.session_factory = sessionmaker(
            bind=self.engine, autoflush=False, future=True
        )

    def init_database(self) -> None:
        """Initialize database schema"""
        # Import models so they are registered on Base.metadata
        import domain.models  # noqa: F401

        with self.engine.begin() as conn:
            Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

    def drop_database(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def new_session(self) -> Session:
        return self.session_factory()

    def ping(self) -> bool:
        """Return True when the database answers a trivial query."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"Database ping failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()
