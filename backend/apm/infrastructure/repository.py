"""SQLAlchemy Repositories — generic record persistence, one instance per entity kind.

Invariants:
    - Translates Entity Records <-> ORM rows by field name; owns no business logic
    - create() assigns the identity when absent and stamps created_at == updated_at
      immediately before the write, overwriting caller-supplied timestamps
    - update() is a full-row replace by id and is authoritative for updated_at
    - list() orders newest first (created_at DESC, id as tie-breaker)
    - get_by_id/update/delete of an absent id raise ResourceNotFoundError
    - Every operation uses its own session; no state is kept between calls

Design Decisions:
    - One generic class parameterized by (ORM model, record type) instead of one
      hand-written repository per kind
    - Identity generated before the session opens: a random-source failure never
      reaches the database error mapping
"""

import logging
from dataclasses import fields, replace
from typing import Generic, TypeVar

from sqlalchemy import delete, select

from apm.core.errors import ResourceNotFoundError
from apm.core.identity import generate_id, next_write_time, utc_now
from apm.core.records import Record, UserRecord
from apm.db.base import Base
from apm.infrastructure.database import DatabaseSessionManager
from apm.models.user import User

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)

_WRITE_ONCE = frozenset({"id", "created_at"})


class SqlAlchemyRepository(Generic[R]):
    """Record repository backed by one ORM model / table."""

    def __init__(
        self,
        db: DatabaseSessionManager,
        model: type[Base],
        record_type: type[R],
        label: str,
    ):
        self._db = db
        self._model = model
        self._record_type = record_type
        self._label = label
        self._fields = tuple(f.name for f in fields(record_type))

    async def create(self, record: R) -> R:
        now = utc_now()
        record = replace(
            record, id=record.id or generate_id(), created_at=now, updated_at=now,
        )
        async with self._db.session() as db:
            row = self._model(**self._values(record))
            db.add(row)
            await db.commit()
            await db.refresh(row)
            return self._to_record(row)

    async def get_by_id(self, record_id: str) -> R:
        async with self._db.session() as db:
            row = await db.get(self._model, record_id)
            if row is None:
                raise ResourceNotFoundError(self._label, record_id)
            return self._to_record(row)

    async def list(self, limit: int, offset: int) -> list[R]:
        query = (
            select(self._model)
            .order_by(self._model.created_at.desc(), self._model.id)
            .limit(limit)
            .offset(offset)
        )
        async with self._db.session() as db:
            result = await db.execute(query)
            return [self._to_record(row) for row in result.scalars().all()]

    async def update(self, record: R) -> None:
        async with self._db.session() as db:
            row = await db.get(self._model, record.id)
            if row is None:
                raise ResourceNotFoundError(self._label, record.id)
            values = self._values(record)
            values["updated_at"] = next_write_time(row.updated_at)
            for name, value in values.items():
                if name not in _WRITE_ONCE:
                    setattr(row, name, value)
            await db.commit()

    async def delete(self, record_id: str) -> None:
        async with self._db.session() as db:
            result = await db.execute(
                delete(self._model).where(self._model.id == record_id),
            )
            await db.commit()
            if result.rowcount == 0:
                raise ResourceNotFoundError(self._label, record_id)

    def _values(self, record: R) -> dict:
        return {name: getattr(record, name) for name in self._fields}

    def _to_record(self, row) -> R:
        return self._record_type(**{name: getattr(row, name) for name in self._fields})


class SqlAlchemyUserRepository(SqlAlchemyRepository[UserRecord]):
    """User repository with lookup by login email."""

    def __init__(self, db: DatabaseSessionManager):
        super().__init__(db, User, UserRecord, "User")

    async def get_by_email(self, email: str) -> UserRecord:
        async with self._db.session() as db:
            result = await db.execute(select(User).where(User.email == email))
            row = result.scalar_one_or_none()
            if row is None:
                raise ResourceNotFoundError("User", email)
            return self._to_record(row)
