"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Repositories speak Entity Records, never ORM rows
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, services accept in-memory fakes in tests
    - Async in Protocol: implementations do IO
"""

from typing import Protocol, TypeVar

from apm.core.records import Record, UserRecord

R = TypeVar("R", bound=Record)


class Repository(Protocol[R]):
    """Contract for single-kind record persistence."""
    async def create(self, record: R) -> R: ...
    async def get_by_id(self, record_id: str) -> R: ...
    async def list(self, limit: int, offset: int) -> list[R]: ...
    async def update(self, record: R) -> None: ...
    async def delete(self, record_id: str) -> None: ...


class UserRepository(Repository[UserRecord], Protocol):
    """User persistence with lookup by login email."""
    async def get_by_email(self, email: str) -> UserRecord: ...
