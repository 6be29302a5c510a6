"""
Pytest configuration for tests.

Points the app at an in-memory SQLite database BEFORE any modqueue module
is imported; individual tests build their own engines on top of that.
"""
import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("OSU_API_KEY", "test-key")

from datetime import datetime, timezone  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from modqueue.admission import InvalidBeatmapId  # noqa: E402
from modqueue.database import build_engine, build_session_factory, create_schema  # noqa: E402
from modqueue.enums import ModderType  # noqa: E402
from modqueue.models import QueueSettings, User  # noqa: E402
from modqueue.services import request_service  # noqa: E402

NOW = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


def make_row(**overrides: Any) -> dict[str, Any]:
    """One difficulty as the osu! v1 API returns it (every value a string)."""
    row = {
        "beatmap_id": "1001",
        "beatmapset_id": "555",
        "title": "Blue Zenith",
        "artist": "xi",
        "creator": "mapper",
        "bpm": "200",
        "total_length": "125",
        "version": "Insane",
        "mode": "0",
        "difficultyrating": "4.5678",
        "approved": "0",
    }
    row.update(overrides)
    return row


class FakeOsuClient:
    def __init__(self, rows: list[dict[str, Any]] | None = None, fail: bool = False) -> None:
        self.rows = rows if rows is not None else [make_row()]
        self.fail = fail
        self.calls: list[Any] = []

    async def get_beatmapset(self, set_id):
        self.calls.append(set_id)
        if self.fail or not self.rows:
            raise InvalidBeatmapId(f"unknown set {set_id}")
        return self.rows


@pytest.fixture
def osu_client() -> FakeOsuClient:
    return FakeOsuClient()


@pytest.fixture(autouse=True)
def _reset_target_locks():
    request_service._target_locks.clear()
    yield
    request_service._target_locks.clear()


@pytest_asyncio.fixture
async def engine(tmp_path):
    db_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'queue.db'}")
    await create_schema(db_engine)
    yield db_engine
    await db_engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as db_session:
        yield db_session


async def add_user(session, username: str, *, is_admin: bool = False) -> User:
    user = User(username=username, hashed_password="not-a-real-hash", is_admin=is_admin)
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


async def add_queue(session, owner: str = "owner", **overrides: Any) -> QueueSettings:
    values = {
        "owner": owner,
        "modder_type": ModderType.MODDER,
        "modes": ["Standard"],
        "open": True,
        "cooldown": 7,
        "max_pending": 10,
    }
    values.update(overrides)
    queue = QueueSettings(**values)
    session.add(queue)
    await session.commit()
    await session.refresh(queue)
    return queue
