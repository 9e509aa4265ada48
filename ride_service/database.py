"""
Ride Service: Database Session Management
=========================================

What:  Async SQLAlchemy engine, session factory, schema initializer and the
       FastAPI session dependency.
How:   Creates an async engine with connection pooling and provides a session
       dependency that commits on success and rolls back on error.
Who:   Route handlers (via Depends), the application lifespan, and tests.
When:  Engine is created at module import; sessions are created per request.

Connection Pooling:
    PostgreSQL (asyncpg):  pool_size / max_overflow / pool_pre_ping from settings,
                           connections recycled every hour.
    SQLite (aiosqlite):    check_same_thread=False; an in-memory database uses a
                           StaticPool so every session sees the same tables.
"""

import logging
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from ride_service.config import settings

logger = logging.getLogger(__name__)


def engine_options(database_url: str) -> Dict[str, Any]:
    """
    Build create_async_engine() keyword arguments for the given URL.

    SQLite does not accept queue-pool sizing arguments, so those are only
    passed for server databases.
    """
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}

    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        if make_url(database_url).database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return options

    options.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
    )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **engine_options(settings.database_url))

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay readable after the commit in
# get_db_session, when the response model is built from the ORM object
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models (shares one metadata object)."""
    pass


# ── Schema Initializer ────────────────────────────────────────────────────
async def init_schema(target: Optional[AsyncEngine] = None) -> None:
    """
    Ensure the `rides` table exists.

    What:    Runs Base.metadata.create_all against the engine.
    When:    Application startup (lifespan), before any request is served.
    How:     create_all checks for existing tables first, so repeated calls
             leave an existing schema and its rows untouched.

    Args:
        target: Engine to initialize. Defaults to the application engine.

    Raises:
        SQLAlchemyError: The schema could not be created. Startup must abort.
    """
    # Registers the Ride model with Base.metadata
    from ride_service.models import ride  # noqa: F401

    target = target or engine
    try:
        async with target.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as e:
        logger.critical("Could not initialize database schema: %s", str(e))
        raise
    logger.info("Database schema ready (%s)", target.url.render_as_string(hide_password=True))


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns the connection to the pool)

    Example usage in a route:
        @router.get("/rides")
        async def list_rides(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes all pooled connections. Called during application shutdown."""
    await engine.dispose()
