"""Security — verifies werkzeug password hashes and HS256 access tokens.

Invariants:
    - Hashes are salted: the same password never hashes twice to the same string
    - verify_password() is False (never raises) for wrong passwords and malformed hashes
    - Tokens carry sub/email/role and expire after the configured ttl
"""

from datetime import timedelta

import pytest

from apm.core.errors import AuthenticationFailed
from apm.core.records import UserRecord
from apm.infrastructure.security import TokenIssuer, hash_password, verify_password

SECRET = "test-secret-key-0123456789abcdef0123"


@pytest.fixture
def user():
    return UserRecord(
        id="f" * 32, email="ada@example.com", first_name="Ada", last_name="Lovelace",
        role="organization_admin",
    )


CHEAP = "pbkdf2:sha256:1000"


def test_hash_uses_requested_method():
    method, salt, digest = hash_password("s3cret-pass", CHEAP).split("$")
    assert method == CHEAP
    assert salt
    assert digest


def test_default_method_is_scrypt():
    assert hash_password("s3cret-pass").startswith("scrypt:")


def test_hash_is_salted():
    assert hash_password("s3cret-pass", CHEAP) != hash_password("s3cret-pass", CHEAP)


def test_verify_password():
    encoded = hash_password("s3cret-pass", CHEAP)
    assert verify_password("s3cret-pass", encoded)
    assert not verify_password("wrong-pass", encoded)


@pytest.mark.parametrize("encoded", [
    "",
    "garbage",
    "pbkdf2:sha256:many$salt$00",
    "pbkdf2:sha999:1000$salt$00",
    "bcrypt$salt$00",
])
def test_verify_malformed_hash_is_false(encoded):
    assert verify_password("s3cret-pass", encoded) is False


def test_token_round_trip(user):
    issuer = TokenIssuer(SECRET, timedelta(hours=24))
    claims = issuer.decode(issuer.issue(user))
    assert claims["sub"] == user.id
    assert claims["email"] == "ada@example.com"
    assert claims["role"] == "organization_admin"
    assert claims["exp"] - claims["iat"] == 24 * 3600


def test_expired_token_rejected(user):
    issuer = TokenIssuer(SECRET, timedelta(seconds=-10))
    with pytest.raises(AuthenticationFailed) as exc_info:
        issuer.decode(issuer.issue(user))
    assert exc_info.value.message == "token expired"


def test_token_signed_with_other_secret_rejected(user):
    token = TokenIssuer(SECRET, timedelta(hours=1)).issue(user)
    other = TokenIssuer("another-secret-key-0123456789abcdef", timedelta(hours=1))
    with pytest.raises(AuthenticationFailed) as exc_info:
        other.decode(token)
    assert exc_info.value.message == "invalid token"
