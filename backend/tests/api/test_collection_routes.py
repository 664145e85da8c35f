"""Collection Routes — the same CRUD contract exercised against all thirteen collections.

Invariants:
    - Every collection supports create, list, get and delete
    - Every collection except logs supports update (logs -> 405)
    - Not-found descriptions name the collection's resource
"""

from datetime import datetime

import pytest

from apm.services.resources import COLLECTIONS

# path -> (create payload, update payload or None)
CASES = {
    "/entities": ({"display_name": "Acme Corp"}, {"display_name": "Acme Inc"}),
    "/software": (
        {"display_name": "CRM", "software_type": "web"}, {"vendor": "Acme"},
    ),
    "/stakeholders": ({"user_id": "u-1", "role": "owner"}, {"role": "sponsor"}),
    "/statuses": (
        {"status_type": "lifecycle", "status_name": "production"},
        {"status_name": "retired"},
    ),
    "/status-logs": (
        {"status_id": "s-1", "status_of": "sw-1", "status_start": "2024-01-01T00:00:00Z"},
        {"status_end": "2024-06-01T00:00:00Z"},
    ),
    "/ranks": (
        {"source_link": "https://reviews.example.com/crm", "source_name": "Reviews"},
        {"average_score": 4.5},
    ),
    "/news": ({"title": "Launch"}, {"description": "Big launch"}),
    "/media": (
        {"title": "Logo", "media_url": "https://cdn.example.com/logo.png"},
        {"source_name": "CDN"},
    ),
    "/product-documentation": (
        {
            "foreign_key": "sw-1", "document_type": "manual",
            "document_url": "https://docs.example.com/manual",
        },
        {"document_type": "guide"},
    ),
    "/user-groups": ({"display_name": "Admins"}, {"display_name": "Operators"}),
    "/software-groups": ({"group_name": "Finance"}, {"group_description": "Finance apps"}),
    "/functional-categories": ({"category_name": "ERP"}, {"category_parent": "root"}),
    "/logs": ({"foreign_key": "sw-1", "context": "created", "type": "audit"}, None),
}

DEFINITIONS = {d.path: d for d in COLLECTIONS}


def _same(actual, expected) -> bool:
    if isinstance(actual, str) and isinstance(expected, str):
        try:
            return datetime.fromisoformat(actual.replace("Z", "+00:00")) == \
                datetime.fromisoformat(expected.replace("Z", "+00:00"))
        except ValueError:
            return actual == expected
    return actual == expected


def test_every_collection_covered():
    assert set(CASES) == set(DEFINITIONS)


@pytest.mark.parametrize("path", list(CASES))
async def test_crud_contract(client, path):
    create, update = CASES[path]
    base = f"/api/v1{path}"

    res = await client.post(base, json=create)
    assert res.status_code == 201, res.text
    created = res.json()
    for key, value in create.items():
        assert _same(created[key], value), key

    res = await client.get(base)
    assert res.status_code == 200
    assert res.json()["count"] == 1

    res = await client.get(f"{base}/{created['id']}")
    assert res.status_code == 200
    assert res.json() == created

    if update is not None:
        res = await client.put(f"{base}/{created['id']}", json=update)
        assert res.status_code == 204
        stored = (await client.get(f"{base}/{created['id']}")).json()
        for key, value in update.items():
            assert _same(stored[key], value), key

    res = await client.delete(f"{base}/{created['id']}")
    assert res.status_code == 204

    res = await client.get(f"{base}/{created['id']}")
    assert res.status_code == 404
    assert res.json()["message"] == DEFINITIONS[path].describe_failure("get")


@pytest.mark.parametrize("path", list(CASES))
async def test_empty_collection_lists_nothing(client, path):
    res = await client.get(f"/api/v1{path}")
    assert res.json() == {"data": [], "limit": 10, "offset": 0, "count": 0}


@pytest.mark.parametrize("path", list(CASES))
async def test_empty_body_rejected(client, path):
    res = await client.post(f"/api/v1{path}", json={})
    assert res.status_code == 400
    assert res.json()["code"] == 400


async def test_logs_cannot_be_updated(client):
    created = (await client.post(
        "/api/v1/logs", json={"foreign_key": "sw-1", "context": "created", "type": "audit"},
    )).json()
    res = await client.put(f"/api/v1/logs/{created['id']}", json={"context": "edited"})
    assert res.status_code == 405
    assert res.json()["code"] == 405


async def test_stakeholder_user_id_fixed(client):
    created = (await client.post(
        "/api/v1/stakeholders", json={"user_id": "u-1", "role": "owner"},
    )).json()
    await client.put(f"/api/v1/stakeholders/{created['id']}", json={"user_id": "u-2"})
    stored = (await client.get(f"/api/v1/stakeholders/{created['id']}")).json()
    assert stored["user_id"] == "u-1"


async def test_invalid_url_rejected(client):
    res = await client.post(
        "/api/v1/news", json={"title": "Launch", "external_url": "not a url"},
    )
    assert res.status_code == 400


async def test_unknown_route_uses_envelope(client):
    res = await client.get("/api/v1/nothing-here")
    assert res.status_code == 404
    assert set(res.json()) == {"error", "message", "code"}


# path -> a field required at creation and updatable afterwards
REQUIRED_UPDATABLE = {
    "/entities": "display_name",
    "/software": "display_name",
    "/stakeholders": "role",
    "/statuses": "status_name",
    "/ranks": "source_name",
    "/news": "title",
    "/media": "media_url",
    "/product-documentation": "document_type",
    "/user-groups": "display_name",
    "/software-groups": "group_name",
    "/functional-categories": "category_name",
}


@pytest.mark.parametrize("path, field", list(REQUIRED_UPDATABLE.items()))
async def test_whitespace_update_keeps_required_field(client, path, field):
    base = f"/api/v1{path}"
    created = (await client.post(base, json=CASES[path][0])).json()
    res = await client.put(f"{base}/{created['id']}", json={field: "   "})
    assert res.status_code == 204
    stored = (await client.get(f"{base}/{created['id']}")).json()
    assert stored[field] == created[field]


async def test_whitespace_document_url_keeps_stored_url(client):
    base = "/api/v1/product-documentation"
    created = (await client.post(base, json=CASES["/product-documentation"][0])).json()
    await client.put(f"{base}/{created['id']}", json={"document_url": "  "})
    stored = (await client.get(f"{base}/{created['id']}")).json()
    assert stored["document_url"] == "https://docs.example.com/manual"
