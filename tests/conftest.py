import os

# Keep test runs off the developer's .env and any real provider
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["SUMMARY_ENABLED"] = "false"
os.environ.pop("OPENAI_API_KEY", None)
os.environ.pop("SUMMARY_API_KEY", None)

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from career_quiz.constants import SessionStatus
from career_quiz.db.models import Base, QuizSession
from career_quiz.db.session import get_session_factory
from career_quiz.services.lifecycle import SessionLifecycle
from career_quiz.services.session_store import SessionStore


@pytest_asyncio.fixture
async def db_engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(db_engine):
    factory = get_session_factory(db_engine)
    async with factory() as session:
        yield session


@pytest.fixture
def store(db):
    return SessionStore(db)


@pytest.fixture
def lifecycle(store):
    return SessionLifecycle(store, max_score=7)


@pytest.fixture
def make_session():
    """Builds an unsaved QuizSession with sensible defaults for a completed quiz."""
    counter = {"n": 0}

    def _make(**overrides) -> QuizSession:
        counter["n"] += 1
        values = dict(
            session_id=f"quiz_test_{counter['n']}",
            full_name="Test User",
            email="test@example.com",
            age=24,
            gender="female",
            education="bachelors",
            occupation="Student",
            location="Kathmandu",
            answers={"q1": "yes"},
            scores={"R": 6, "I": 4, "A": 2, "S": 7, "E": 1, "C": 3},
            top_three_code="SRI",
            time_taken=300,
            status=SessionStatus.COMPLETE.value,
            started_at=datetime(2026, 5, 1, 10, 0, tzinfo=timezone.utc),
            completed_at=datetime(2026, 5, 1, 10, 5, tzinfo=timezone.utc),
        )
        values.update(overrides)
        return QuizSession(**values)

    return _make
