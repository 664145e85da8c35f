"""People Schemas — users, user groups, stakeholders and login.

Invariants:
    - UserResponse never carries password_hash
    - Stakeholder.user_id is fixed at creation (absent from StakeholderUpdate)
"""

from pydantic import Field

from apm.core.domain_types import UserRole
from apm.schemas.common import (
    OptionalUrl, RecordResponse, RequiredText, TrimmedText, WireModel,
)


# --- User --------------------------------------------------------------------

class UserCreate(WireModel):
    email: RequiredText
    password: str = Field(min_length=8)
    first_name: RequiredText
    last_name: RequiredText
    role: UserRole
    organization_id: str = ""
    avatar_url: OptionalUrl = ""


class UserResponse(RecordResponse):
    email: str
    first_name: str
    last_name: str
    role: str
    organization_id: str
    avatar_url: str
    mfa_enabled: bool


# --- User group --------------------------------------------------------------

class UserGroupCreate(WireModel):
    display_name: RequiredText


class UserGroupUpdate(WireModel):
    display_name: TrimmedText | None = None


class UserGroupResponse(RecordResponse):
    display_name: str


# --- Stakeholder -------------------------------------------------------------

class StakeholderCreate(WireModel):
    user_id: RequiredText
    role: RequiredText
    foreign_key: str = ""


class StakeholderUpdate(WireModel):
    foreign_key: str | None = None
    role: TrimmedText | None = None


class StakeholderResponse(RecordResponse):
    foreign_key: str
    user_id: str
    role: str


# --- Auth --------------------------------------------------------------------

class LoginRequest(WireModel):
    email: RequiredText
    password: str = Field(min_length=1)


class LoginResponse(WireModel):
    user: UserResponse
    access_token: str
