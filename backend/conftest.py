import asyncio
import os
import random
import tempfile
from pathlib import Path

import pytest

# Point the app at a throwaway SQLite file before any settings are loaded
_TEST_DB = Path(tempfile.mkdtemp(prefix="mood-lens-")) / "test.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB}"

from fastapi.testclient import TestClient  # noqa: E402

from apps.core.database import AsyncSessionLocal, Base, engine, init_db  # noqa: E402
from apps.emotion import tables as _emotion_tables  # noqa: E402,F401
from apps.emotion.engine import EmotionScorer  # noqa: E402
from apps.emotion.router import get_scorer  # noqa: E402
from apps.stats import tables as _stats_tables  # noqa: E402,F401
from apps.users import tables as _users_tables  # noqa: E402,F401
from main import app  # noqa: E402


async def _reset_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await init_db()
    await engine.dispose()


@pytest.fixture
def fresh_db():
    """Empty schema with the stats row seeded."""
    asyncio.run(_reset_db())


@pytest.fixture
def run_db(fresh_db):
    """Run ``fn(session)`` to completion inside its own event loop."""

    def runner(fn):
        async def _go():
            try:
                async with AsyncSessionLocal() as session:
                    return await fn(session)
            finally:
                await engine.dispose()

        return asyncio.run(_go())

    return runner


@pytest.fixture
def seeded_scorer():
    return EmotionScorer(rng=random.Random(1234))


@pytest.fixture
def client(fresh_db, seeded_scorer):
    app.dependency_overrides[get_scorer] = lambda: seeded_scorer
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {
        "X-User-Id": "user-1",
        "X-User-Email": "alice@example.com",
        "X-User-First-Name": "Alice",
        "X-User-Last-Name": "Smith",
    }


@pytest.fixture
def other_headers():
    return {"X-User-Id": "user-2"}
