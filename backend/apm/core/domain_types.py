"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId wraps the 32-char hex identity string
    - All closed value sets encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and to String columns without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", str)


# ─── Enums ───────────────────────────────────────────────────────

class SoftwareType(str, Enum):
    """Kinds of software tracked in the portfolio."""
    API = "api"
    WEB = "web"
    MOBILE = "mobile"
    DESKTOP = "desktop"
    EMBEDDED = "embedded"
    MIDDLEWARE = "middleware"
    LIBRARY = "library"


class UserRole(str, Enum):
    """Roles a user can hold within an organization."""
    ORGANIZATION_ADMIN = "organization_admin"
    APPLICATION_PORTFOLIO_MANAGER = "application_portfolio_manager"
    STAKEHOLDER = "stakeholder"


class MergePolicy(str, Enum):
    """How an update request is merged onto the stored record.

    NON_EMPTY: only non-empty / non-zero values overwrite. Omitting a field and
        sending its zero value are indistinguishable, so a field can never be
        cleared through an update.
    EXPLICIT: every field present in the request body overwrites, empty values
        included; null resets an optional field to its zero value.
    """
    NON_EMPTY = "non_empty"
    EXPLICIT = "explicit"
