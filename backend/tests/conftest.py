"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Environment defaults set before apm.config is first imported
    - Every test gets a fresh in-memory SQLite database
    - Services are built exactly as the lifespan builds them, over the test database
    - The client talks to the real app; app.state.services swapped in per test

Design Decisions:
    - SQLite in-memory with StaticPool: every session sees the same connection/database
    - Cheap password hash method: hashing cost is not under test here
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key-0123456789abcdef0123")
os.environ.setdefault("PASSWORD_HASH_METHOD", "pbkdf2:sha256:1000")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import apm.models  # noqa: E402,F401
from apm.config import Settings  # noqa: E402
from apm.core.domain_types import MergePolicy  # noqa: E402
from apm.db.base import Base  # noqa: E402
from apm.infrastructure.database import DatabaseSessionManager  # noqa: E402
from apm.main import app  # noqa: E402
from apm.services.registry import build_services  # noqa: E402

TEST_SECRET = "test-secret-key-0123456789abcdef0123"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def database(test_engine):
    return DatabaseSessionManager(test_engine)


@pytest.fixture
def settings():
    return Settings(
        jwt_secret=TEST_SECRET,
        password_hash_method="pbkdf2:sha256:1000",
        update_merge_policy=MergePolicy.NON_EMPTY,
    )


@pytest.fixture
def services(database, settings):
    return build_services(database, settings)


@pytest.fixture
def explicit_services(database, settings):
    """Services whose updates honour explicitly supplied empty values."""
    explicit = settings.model_copy(update={"update_merge_policy": MergePolicy.EXPLICIT})
    return build_services(database, explicit)


@pytest.fixture
async def client(services):
    """FastAPI test client wired to the test database."""
    app.state.services = services
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    del app.state.services
