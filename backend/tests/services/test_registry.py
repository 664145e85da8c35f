"""Service Container — verifies wiring of every collection."""

import pytest

from apm.services.crud_service import CrudService
from apm.services.resources import COLLECTIONS, USERS


def test_one_service_per_collection(services):
    assert set(services.collections) == {d.name for d in COLLECTIONS}
    for definition in COLLECTIONS:
        service = services.collection(definition.name)
        assert isinstance(service, CrudService)
        assert service.definition is definition


def test_collections_are_read_only(services):
    with pytest.raises(TypeError):
        services.collections["software"] = None


def test_unknown_collection_raises(services):
    with pytest.raises(KeyError):
        services.collection("users")


def test_collection_paths_unique():
    paths = [d.path for d in COLLECTIONS]
    assert len(paths) == len(set(paths)) == 13


def test_only_logs_are_append_only():
    assert [d.name for d in COLLECTIONS if not d.supports_update] == ["logs"]


def test_users_have_no_collection_or_update():
    assert USERS.path is None
    assert not USERS.supports_update
