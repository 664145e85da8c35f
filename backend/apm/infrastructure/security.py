"""Security — password hashing and signed access tokens.

Invariants:
    - Passwords stored in werkzeug's "<method>$<salt>$<hash>" format
    - verify_password() never raises on malformed or unsupported hashes
    - Access tokens are HS256 JWTs carrying sub, email, role, iat and exp
    - Expired or tampered tokens raise AuthenticationFailed
"""

from datetime import timedelta

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from apm.core.errors import AuthenticationFailed
from apm.core.identity import utc_now
from apm.core.records import UserRecord

PASSWORD_HASH_METHOD = "scrypt"
JWT_ALGORITHM = "HS256"


def hash_password(password: str, method: str = PASSWORD_HASH_METHOD) -> str:
    return generate_password_hash(password, method=method)


def verify_password(password: str, encoded: str) -> bool:
    try:
        return check_password_hash(encoded, password)
    except ValueError:
        return False


class TokenIssuer:
    """Signs and verifies access tokens with a shared secret."""

    def __init__(self, secret: str, ttl: timedelta):
        self._secret = secret
        self._ttl = ttl

    def issue(self, user: UserRecord) -> str:
        now = utc_now()
        claims = {
            "sub": user.id,
            "email": user.email,
            "role": user.role,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(claims, self._secret, algorithm=JWT_ALGORITHM)

    def decode(self, token: str) -> dict:
        try:
            return jwt.decode(token, self._secret, algorithms=[JWT_ALGORITHM])
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationFailed("token expired") from e
        except jwt.InvalidTokenError as e:
            raise AuthenticationFailed("invalid token") from e
