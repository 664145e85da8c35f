"""User & Auth Services — user records with hashed passwords, and credential login.

Invariants:
    - Plain passwords never reach the repository; only werkzeug password hashes are stored
    - Unknown email and wrong password produce the same AuthenticationFailed (401)
    - Storage failures during login surface as 500, not as 401
    - ensure_user() is idempotent on email
"""

import logging

from pydantic import BaseModel

from apm.core.domain_types import MergePolicy
from apm.core.errors import AuthenticationFailed, ResourceNotFoundError
from apm.core.records import UserRecord
from apm.core.repository_protocols import UserRepository
from apm.infrastructure.security import (
    PASSWORD_HASH_METHOD, TokenIssuer, hash_password, verify_password,
)
from apm.schemas.people import LoginResponse, UserCreate, UserResponse
from apm.services.crud_service import CrudService
from apm.services.resources import USERS

logger = logging.getLogger(__name__)


class UserService(CrudService[UserRecord]):
    """CRUD for users; hashes the password on create."""

    def __init__(
        self,
        repository: UserRepository,
        merge_policy: MergePolicy = MergePolicy.NON_EMPTY,
        hash_method: str = PASSWORD_HASH_METHOD,
    ):
        super().__init__(USERS, repository, merge_policy)
        self._users = repository
        self._hash_method = hash_method

    def _to_record(self, request: BaseModel) -> UserRecord:
        data = request.model_dump()
        password = data.pop("password")
        data["password_hash"] = hash_password(password, self._hash_method)
        return UserRecord(**data)

    async def ensure_user(self, request: UserCreate) -> UserResponse:
        """Return the user with request.email, creating it when missing."""
        try:
            existing = await self._users.get_by_email(request.email)
        except ResourceNotFoundError:
            logger.info("Bootstrapping user", extra={"resource": "users"})
            return await self.create(request)
        return UserResponse.model_validate(existing)


class AuthService:
    """Verifies credentials and issues access tokens."""

    def __init__(self, repository: UserRepository, tokens: TokenIssuer):
        self._users = repository
        self._tokens = tokens

    async def login(self, email: str, password: str) -> LoginResponse:
        try:
            user = await self._users.get_by_email(email)
        except ResourceNotFoundError:
            logger.warning("Login failed: unknown email")
            raise AuthenticationFailed()
        if not verify_password(password, user.password_hash):
            logger.warning("Login failed: password mismatch", extra={"record_id": user.id})
            raise AuthenticationFailed()
        logger.info("Login succeeded", extra={"record_id": user.id})
        return LoginResponse(
            user=UserResponse.model_validate(user),
            access_token=self._tokens.issue(user),
        )

    def verify_token(self, token: str) -> dict:
        return self._tokens.decode(token)
