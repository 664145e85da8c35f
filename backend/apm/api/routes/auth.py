"""Auth Routes — credential login, mounted outside the versioned resource group.

Invariants:
    - POST /api/auth/login -> 200 {user, access_token} or 401 envelope
    - Malformed body -> 400 via the validation handler
"""

from fastapi import APIRouter, Depends

from apm.api.dependencies import describe_failure, get_services
from apm.schemas.common import ErrorResponse
from apm.schemas.people import LoginRequest, LoginResponse
from apm.services.registry import ServiceContainer

router = APIRouter(
    prefix="/api/auth", tags=["auth"],
    responses={401: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest, services: ServiceContainer = Depends(get_services),
):
    """Exchange email and password for an access token."""
    with describe_failure("Failed to log in"):
        return await services.auth.login(body.email, body.password)
