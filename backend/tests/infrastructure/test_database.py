"""Database Session Manager — verifies error mapping, rollback and health checks."""

import pytest
from sqlalchemy import text

from apm.core.errors import DatabaseError, ResourceNotFoundError
from apm.infrastructure.database import DatabaseSessionManager


async def test_health_check_true_when_reachable(database):
    assert await database.health_check() is True


async def test_health_check_false_when_unreachable():
    broken = DatabaseSessionManager.from_url(
        "sqlite+aiosqlite:////nonexistent-dir/for/sure/apm.db",
    )
    assert await broken.health_check() is False
    await broken.dispose()


async def test_sqlalchemy_errors_become_database_error(database):
    with pytest.raises(DatabaseError):
        async with database.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))


async def test_domain_errors_pass_through(database):
    with pytest.raises(ResourceNotFoundError):
        async with database.session():
            raise ResourceNotFoundError("Software", "abc")
