"""
Shared fixtures.

Repository tests run against a real file-backed SQLite database (aiosqlite)
with foreign keys enforced, created fresh for every test.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

import user_service.modules.users  # noqa: F401 - registers row classes
from user_service.core.database import Base, build_engine, build_session_maker
from user_service.modules.roles import seed_roles
from user_service.modules.users.schemas import RegisterRequest


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Create an engine over a fresh SQLite file with the schema applied."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'users.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    """Session factory bound to the test engine."""
    return build_session_maker(engine)


@pytest_asyncio.fixture
async def role_ids(session_maker):
    """Seed the default roles and return their ids by name."""
    return await seed_roles(session_maker)


@pytest.fixture
def sample_register_request(role_ids):
    """Registration data for a customer."""
    return RegisterRequest(
        name="Ann",
        username="ann1",
        password="hashed-x",
        phone_number="08123",
        email="ann@x.io",
        role_id=role_ids["customer"],
    )


@pytest.fixture
def mock_db():
    """Create a mock database session."""
    db = AsyncMock()
    db.add = MagicMock()
    db.commit = AsyncMock()
    db.refresh = AsyncMock()
    db.execute = AsyncMock()
    return db


@pytest.fixture
def mock_session_maker(mock_db):
    """Session factory whose sessions are mock_db."""
    session_cm = MagicMock()
    session_cm.__aenter__ = AsyncMock(return_value=mock_db)
    session_cm.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=session_cm)
