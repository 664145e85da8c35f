"""Route Dependencies — access to the ServiceContainer and shared request checks.

Invariants:
    - The container is read from app.state, set once by the lifespan (or a test fixture)
    - Path identifiers are trimmed; blank identifiers are rejected with 400
    - describe_failure() attaches an operation description without replacing one already set
"""

from contextlib import contextmanager

from fastapi import Request

from apm.core.errors import InventoryError, RequestValidationFailed
from apm.services.registry import ServiceContainer


def get_services(request: Request) -> ServiceContainer:
    """FastAPI dependency returning the application's service container."""
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise RuntimeError("Services not initialized")
    return services


def require_id(raw_id: str) -> str:
    record_id = raw_id.strip()
    if not record_id:
        raise RequestValidationFailed(
            "missing or invalid ID", field="id", description="Missing or invalid ID",
        )
    return record_id


@contextmanager
def describe_failure(description: str):
    """Label any InventoryError raised inside the block with `description`."""
    try:
        yield
    except InventoryError as e:
        if e.description is None:
            e.description = description
        raise
