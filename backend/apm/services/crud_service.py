"""CRUD Service — the generic create/get/list/update/delete workflow shared by every kind.

Invariants:
    - Create maps the wire request onto a full record (unset optionals take their zero value)
    - List clamps pagination itself, independent of whatever the HTTP layer already did
    - Update is read-modify-write: fetch, merge per MergePolicy, full-row replace
    - Delete delegates directly; the repository decides not-found
    - ResourceNotFoundError and RequestValidationFailed pass through unchanged;
      every other InventoryError is wrapped into ServiceOperationError (500)

Design Decisions:
    - Under MergePolicy.NON_EMPTY an update cannot reset a field to "" or 0: omitted and
      zero-valued fields are indistinguishable. MergePolicy.EXPLICIT honours presence instead.
"""

import logging
from contextlib import contextmanager
from typing import Generic, TypeVar

from pydantic import BaseModel

from apm.core.domain_types import MergePolicy
from apm.core.errors import (
    InventoryError, RequestValidationFailed, ResourceNotFoundError, ServiceOperationError,
)
from apm.core.merge import merge_update
from apm.core.pagination import clamp_page
from apm.core.records import Record
from apm.core.repository_protocols import Repository
from apm.services.resources import ResourceDefinition

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)

_PASS_THROUGH = (ResourceNotFoundError, RequestValidationFailed)


class CrudService(Generic[R]):
    """Service for one entity kind, parameterized by its ResourceDefinition."""

    def __init__(
        self,
        definition: ResourceDefinition,
        repository: Repository[R],
        merge_policy: MergePolicy = MergePolicy.NON_EMPTY,
    ):
        self.definition = definition
        self._repo = repository
        self._merge_policy = merge_policy

    @property
    def merge_policy(self) -> MergePolicy:
        return self._merge_policy

    async def create(self, request: BaseModel) -> BaseModel:
        logger.info(
            f"Creating {self.definition.singular}",
            extra={"resource": self.definition.name},
        )
        with self._failures("create"):
            created = await self._repo.create(self._to_record(request))
        return self._to_response(created)

    async def get_by_id(self, record_id: str) -> BaseModel:
        logger.info(
            f"Getting {self.definition.singular} by ID",
            extra={"resource": self.definition.name, "record_id": record_id},
        )
        with self._failures("get", record_id):
            record = await self._repo.get_by_id(record_id)
        return self._to_response(record)

    async def list(self, limit: int | None, offset: int | None) -> list[BaseModel]:
        page = clamp_page(limit, offset)
        logger.info(
            f"Listing {self.definition.plural}",
            extra={
                "resource": self.definition.name,
                "limit": page.limit, "offset": page.offset,
            },
        )
        with self._failures("list"):
            found = await self._repo.list(page.limit, page.offset)
        return [self._to_response(record) for record in found]

    async def update(self, record_id: str, request: BaseModel) -> None:
        logger.info(
            f"Updating {self.definition.singular}",
            extra={"resource": self.definition.name, "record_id": record_id},
        )
        with self._failures("update", record_id):
            current = await self._repo.get_by_id(record_id)
            merged = merge_update(current, self._changes(request), self._merge_policy)
            await self._repo.update(merged)

    async def delete(self, record_id: str) -> None:
        logger.info(
            f"Deleting {self.definition.singular}",
            extra={"resource": self.definition.name, "record_id": record_id},
        )
        with self._failures("delete", record_id):
            await self._repo.delete(record_id)

    # ─── Mapping ──────────────────────────────────────────────────

    def _to_record(self, request: BaseModel) -> R:
        return self.definition.record(**request.model_dump())

    def _to_response(self, record: R) -> BaseModel:
        return self.definition.response_schema.model_validate(record)

    def _changes(self, request: BaseModel) -> dict:
        if self._merge_policy is MergePolicy.EXPLICIT:
            return request.model_dump(exclude_unset=True)
        return request.model_dump()

    @contextmanager
    def _failures(self, operation: str, record_id: str | None = None):
        """Translate collaborator errors into this service's vocabulary."""
        try:
            yield
        except _PASS_THROUGH:
            raise
        except InventoryError as e:
            logger.error(
                f"Error during {operation} of {self.definition.singular}: {e.message}",
                extra={
                    "resource": self.definition.name,
                    "record_id": record_id,
                    "error_code": e.code,
                },
            )
            raise ServiceOperationError(
                f"failed to {operation} {self.definition.singular}: {e.message}",
            ) from e
