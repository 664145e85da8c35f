"""Auth Routes — verifies POST /api/auth/login.

Invariants:
    - Valid credentials -> 200 {user, access_token}; no password material in the body
    - Unknown email and wrong password -> identical 401 envelopes
    - Malformed body -> 400
"""

import pytest

from apm.core.domain_types import UserRole
from apm.schemas.people import UserCreate

LOGIN = "/api/auth/login"


@pytest.fixture
async def ada(services):
    return await services.users.create(UserCreate(
        email="ada@example.com", password="correct-horse",
        first_name="Ada", last_name="Lovelace", role=UserRole.STAKEHOLDER,
    ))


async def test_login_success(client, ada, services):
    res = await client.post(LOGIN, json={"email": "ada@example.com", "password": "correct-horse"})
    assert res.status_code == 200
    body = res.json()
    assert body["user"]["id"] == ada.id
    assert body["user"]["email"] == "ada@example.com"
    assert "password_hash" not in body["user"]
    assert services.auth.verify_token(body["access_token"])["sub"] == ada.id


async def test_login_wrong_password(client, ada):
    res = await client.post(LOGIN, json={"email": "ada@example.com", "password": "nope-nope"})
    assert res.status_code == 401
    assert res.json() == {
        "error": "invalid credentials",
        "message": "Invalid credentials",
        "code": 401,
    }


async def test_login_unknown_email_same_as_wrong_password(client, ada):
    unknown = await client.post(LOGIN, json={"email": "eve@example.com", "password": "correct-horse"})
    wrong = await client.post(LOGIN, json={"email": "ada@example.com", "password": "nope-nope"})
    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json()


async def test_login_missing_password(client):
    res = await client.post(LOGIN, json={"email": "ada@example.com"})
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request body"
