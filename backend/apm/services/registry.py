"""Service Container — every service instance, wired once at startup.

Invariants:
    - Built exactly once per application (lifespan) and never mutated afterwards
    - One CrudService per collection in COLLECTIONS, keyed by ResourceDefinition.name
    - Routes obtain services through this container only; no module-level lookups
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from types import MappingProxyType
from typing import Mapping

from apm.config import Settings
from apm.infrastructure.database import DatabaseSessionManager
from apm.infrastructure.repository import SqlAlchemyRepository, SqlAlchemyUserRepository
from apm.infrastructure.security import TokenIssuer
from apm.core.domain_types import UserRole
from apm.schemas.people import UserCreate
from apm.services.crud_service import CrudService
from apm.services.resources import COLLECTIONS
from apm.services.users import AuthService, UserService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceContainer:
    """Immutable bundle of the database manager and all services."""
    database: DatabaseSessionManager
    users: UserService
    auth: AuthService
    collections: Mapping[str, CrudService]

    def collection(self, name: str) -> CrudService:
        return self.collections[name]


def build_services(database: DatabaseSessionManager, settings: Settings) -> ServiceContainer:
    """Instantiate one repository and one service per entity kind."""
    policy = settings.update_merge_policy
    collections = {
        definition.name: CrudService(
            definition,
            SqlAlchemyRepository(
                database, definition.model, definition.record, definition.label,
            ),
            policy,
        )
        for definition in COLLECTIONS
    }
    user_repository = SqlAlchemyUserRepository(database)
    tokens = TokenIssuer(settings.jwt_secret, timedelta(hours=settings.jwt_ttl_hours))
    logger.info(
        f"Services built for {len(collections)} collections "
        f"(merge policy: {policy.value})",
    )
    return ServiceContainer(
        database=database,
        users=UserService(user_repository, policy, settings.password_hash_method),
        auth=AuthService(user_repository, tokens),
        collections=MappingProxyType(collections),
    )


async def bootstrap_admin(services: ServiceContainer, settings: Settings) -> None:
    """Create the configured organization admin if it does not exist yet."""
    if not (settings.admin_email and settings.admin_password):
        return
    await services.users.ensure_user(UserCreate(
        email=settings.admin_email,
        password=settings.admin_password,
        first_name=settings.admin_first_name,
        last_name=settings.admin_last_name,
        role=UserRole.ORGANIZATION_ADMIN,
    ))
