"""
Database connection and session management
Uses SQLAlchemy async engine (asyncpg for PostgreSQL, aiosqlite for SQLite)
Reference: https://docs.sqlalchemy.org/en/20/orm/extensions/asyncio.html
"""
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from inventory.core.config import settings


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the given URL

    SQLite connections get PRAGMA foreign_keys=ON so that the ON DELETE
    RESTRICT references between shoes, brands, categories and SKUs are
    enforced the same way PostgreSQL enforces them.

    Reference: https://docs.sqlalchemy.org/en/20/dialects/sqlite.html#foreign-key-support
    """
    connect_args = {}
    if database_url.startswith("postgresql+asyncpg"):
        # asyncpg-specific connection arguments
        # Reference: https://magicstack.github.io/asyncpg/current/api/index.html#connection
        connect_args = {
            "command_timeout": 60,
            "server_settings": {"application_name": "shoe_inventory"},
        }

    engine = create_async_engine(database_url, echo=echo, connect_args=connect_args)

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def sync_database_url(database_url: str) -> str:
    """
    Map an async database URL to the sync driver Alembic migrates with

    postgresql+asyncpg becomes postgresql+psycopg2 and sqlite+aiosqlite
    becomes plain sqlite; other URLs are returned unchanged.
    """
    return (
        database_url
        .replace("postgresql+asyncpg://", "postgresql+psycopg2://", 1)
        .replace("sqlite+aiosqlite://", "sqlite://", 1)
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create a session factory bound to the engine

    The entity store opens one short-lived session per operation, so
    independent reads inside a workflow can run concurrently.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Keep objects accessible after commit
        autoflush=False,
    )


engine = create_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
async_session_maker = create_session_maker(engine)


# Base class for all database models
# Reference: https://docs.sqlalchemy.org/en/20/orm/declarative_styles.html
class Base(DeclarativeBase):
    """Base class for SQLAlchemy declarative models"""
    pass


# Dependency to get the session factory
# Overridden in tests to point at a throwaway database
# Reference: https://fastapi.tiangolo.com/tutorial/dependencies/
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Dependency function that provides the application session factory"""
    return async_session_maker
