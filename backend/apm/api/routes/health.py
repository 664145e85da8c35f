"""Health Probe — database liveness check outside the versioned prefix.

Invariants:
    - GET /health returns 200 "OK" when the database answers SELECT 1
    - Returns 503 "Database connection error" otherwise (plain text, not the JSON envelope)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from apm.api.dependencies import get_services
from apm.services.registry import ServiceContainer

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health", response_class=PlainTextResponse)
async def health_check(services: ServiceContainer = Depends(get_services)):
    """Liveness probe including database connectivity."""
    if not await services.database.health_check():
        logger.warning("Health check failed: database unreachable")
        return PlainTextResponse(
            "Database connection error",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return PlainTextResponse("OK")
