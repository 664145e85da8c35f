"""CRUD Service — verifies the generic workflow over a real repository and over fakes.

Invariants:
    - create() fills unset optionals with "" and returns the response schema
    - list() clamps pagination regardless of what the caller passes
    - update() under NON_EMPTY keeps stored values for empty fields
    - update() under EXPLICIT clears optional fields and rejects clearing required ones
    - Not-found and validation errors pass through; other failures become 500s
"""

import pytest

from apm.core.domain_types import MergePolicy
from apm.core.errors import (
    DatabaseError, IdentityGenerationError, RequestValidationFailed,
    ResourceNotFoundError, ServiceOperationError,
)
from apm.schemas.inventory import SoftwareCreate, SoftwareResponse, SoftwareUpdate
from apm.services.crud_service import CrudService
from apm.services.resources import SOFTWARE


class FailingRepository:
    """Repository fake whose every call raises the configured error."""

    def __init__(self, error):
        self.error = error

    async def create(self, record):
        raise self.error

    async def get_by_id(self, record_id):
        raise self.error

    async def list(self, limit, offset):
        raise self.error

    async def update(self, record):
        raise self.error

    async def delete(self, record_id):
        raise self.error


class RecordingRepository(FailingRepository):
    """Repository fake that records the page it was asked for."""

    def __init__(self):
        super().__init__(None)
        self.pages = []

    async def list(self, limit, offset):
        self.pages.append((limit, offset))
        return []


@pytest.fixture
def software(services) -> CrudService:
    return services.collection("software")


@pytest.fixture
def explicit_software(explicit_services) -> CrudService:
    return explicit_services.collection("software")


def _crm() -> SoftwareCreate:
    return SoftwareCreate(
        display_name="CRM", software_type="web", vendor="Acme",
        description="Customer relations",
    )


async def test_create_returns_full_response(software):
    created = await software.create(SoftwareCreate(display_name="CRM", software_type="api"))
    assert isinstance(created, SoftwareResponse)
    assert created.software_type == "api"
    assert created.vendor == ""
    assert created.created_at == created.updated_at


async def test_get_by_id_round_trips(software):
    created = await software.create(_crm())
    assert await software.get_by_id(created.id) == created


async def test_list_clamps_pagination():
    repo = RecordingRepository()
    service = CrudService(SOFTWARE, repo)
    await service.list(0, -4)
    await service.list(1000, 3)
    await service.list(None, None)
    await service.list(5, 10**20)
    assert repo.pages == [(10, 0), (100, 3), (10, 0), (5, 2**63 - 1)]


async def test_list_default_page_size(software):
    for i in range(12):
        await software.create(SoftwareCreate(display_name=f"app-{i}", software_type="web"))
    assert len(await software.list(0, 0)) == 10
    assert len(await software.list(500, 0)) == 12


async def test_update_non_empty_keeps_stored_values(software):
    created = await software.create(_crm())
    await software.update(created.id, SoftwareUpdate(display_name="CRM Suite", vendor=""))
    stored = await software.get_by_id(created.id)
    assert stored.display_name == "CRM Suite"
    assert stored.vendor == "Acme"
    assert stored.description == "Customer relations"
    assert stored.updated_at > created.updated_at
    assert stored.created_at == created.created_at


async def test_update_explicit_clears_optional_fields(explicit_software):
    created = await explicit_software.create(_crm())
    await explicit_software.update(created.id, SoftwareUpdate(vendor=""))
    stored = await explicit_software.get_by_id(created.id)
    assert stored.vendor == ""
    assert stored.description == "Customer relations"


async def test_update_explicit_rejects_clearing_required(explicit_software):
    created = await explicit_software.create(_crm())
    with pytest.raises(RequestValidationFailed):
        await explicit_software.update(created.id, SoftwareUpdate(display_name=None))
    assert (await explicit_software.get_by_id(created.id)).display_name == "CRM"


async def test_update_missing_raises_not_found(software):
    with pytest.raises(ResourceNotFoundError):
        await software.update("0" * 32, SoftwareUpdate(vendor="Acme"))


async def test_delete_then_get_not_found(software):
    created = await software.create(_crm())
    await software.delete(created.id)
    with pytest.raises(ResourceNotFoundError):
        await software.get_by_id(created.id)


async def test_delete_missing_raises_not_found(software):
    with pytest.raises(ResourceNotFoundError):
        await software.delete("0" * 32)


async def test_database_failure_wrapped_as_service_error():
    service = CrudService(SOFTWARE, FailingRepository(DatabaseError("boom", "commit")))
    with pytest.raises(ServiceOperationError) as exc_info:
        await service.create(_crm())
    assert exc_info.value.message == "failed to create software: Database commit failed: boom"
    assert exc_info.value.http_status == 500


async def test_identity_failure_wrapped_as_service_error():
    service = CrudService(SOFTWARE, FailingRepository(IdentityGenerationError("no entropy")))
    with pytest.raises(ServiceOperationError) as exc_info:
        await service.create(_crm())
    assert exc_info.value.http_status == 500


async def test_not_found_passes_through_unwrapped():
    service = CrudService(SOFTWARE, FailingRepository(ResourceNotFoundError("Software", "x")))
    with pytest.raises(ResourceNotFoundError):
        await service.get_by_id("x")


def test_merge_policy_exposed(software, explicit_software):
    assert software.merge_policy is MergePolicy.NON_EMPTY
    assert explicit_software.merge_policy is MergePolicy.EXPLICIT


async def test_update_whitespace_required_field_non_empty_is_ignored(software):
    created = await software.create(_crm())
    await software.update(created.id, SoftwareUpdate(display_name="   "))
    assert (await software.get_by_id(created.id)).display_name == "CRM"


async def test_update_whitespace_required_field_explicit_rejected(explicit_software):
    created = await explicit_software.create(_crm())
    with pytest.raises(RequestValidationFailed):
        await explicit_software.update(created.id, SoftwareUpdate(display_name="   "))
    assert (await explicit_software.get_by_id(created.id)).display_name == "CRM"
