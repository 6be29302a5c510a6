import asyncio
import logging
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from .config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)


def _is_memory_sqlite(database_url: str) -> bool:
    if not database_url.startswith("sqlite"):
        return False
    location = database_url.split("://", 1)[-1]
    return ":memory:" in location or location in ("", "/")


def build_engine(database_url: str) -> AsyncEngine:
    options: dict[str, Any] = {"echo": False, "future": True}
    if _is_memory_sqlite(database_url):
        # every session must see the same in-memory database
        options["poolclass"] = StaticPool
        options["connect_args"] = {"check_same_thread": False}
    return create_async_engine(database_url, **options)


def build_session_factory(bind: AsyncEngine) -> sessionmaker:
    return sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


engine: AsyncEngine = build_engine(settings.database_url)
async_session_factory = build_session_factory(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        yield session


async def create_schema(bind: AsyncEngine) -> None:
    # Import models for SQLModel metadata registration
    from . import models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def init_db() -> None:
    attempts = max(1, settings.db_init_max_retries)
    base_delay = max(0.5, float(settings.db_init_retry_interval_seconds))

    for attempt in range(1, attempts + 1):
        try:
            await create_schema(engine)
            logger.info("Queue database schema ready.")
            return
        except Exception as exc:  # pragma: no cover - best effort logging branch
            if attempt == attempts:
                logger.exception("Database initialization failed after %s attempts.", attempts)
                raise

            delay = base_delay * attempt
            logger.warning(
                "Database init attempt %s/%s failed: %s. Retrying in %.1fs...",
                attempt,
                attempts,
                exc,
                delay,
            )
            await asyncio.sleep(delay)


async def dispose_db() -> None:
    await engine.dispose()
