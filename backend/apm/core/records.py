"""Entity Records — full-fidelity in-memory representation of every resource kind.

Invariants:
    - Records are frozen; changes produce a new record via dataclasses.replace
    - Every record carries id, created_at and updated_at (set by the repository on write)
    - Fields without a default are required at creation; optional strings default to "",
      optional numbers to 0 and optional timestamps to None
    - Record field names match ORM column names and wire field names one-to-one

Design Decisions:
    - kw_only dataclasses: the shared identity/timestamp base can precede required fields
    - Enum-valued fields (software_type, role) stored as their plain string value
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class Record:
    """Identity and timestamps shared by every kind."""
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class EntityRecord(Record):
    """An organization-side entity: company, vendor, business unit."""
    display_name: str


@dataclass(frozen=True, kw_only=True)
class SoftwareRecord(Record):
    display_name: str
    software_type: str
    foreign_key: str = ""
    description: str = ""
    software_subtype: str = ""
    vendor: str = ""
    manufacturer: str = ""
    install_type: str = ""
    product_type: str = ""
    context: str = ""
    lifecycle_status: str = ""
    implementation_status: str = ""


@dataclass(frozen=True, kw_only=True)
class StakeholderRecord(Record):
    """A user's role on some subject, referenced by foreign_key."""
    user_id: str
    role: str
    foreign_key: str = ""


@dataclass(frozen=True, kw_only=True)
class StatusRecord(Record):
    """A status definition, optionally bounded by an active window."""
    status_type: str
    status_name: str
    active_start: datetime | None = None
    active_end: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class StatusLogRecord(Record):
    """One period during which `status_of` held status `status_id`."""
    status_id: str
    status_of: str
    status_start: datetime
    status_end: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class RankRecord(Record):
    """An external rating of a software product."""
    source_link: str
    source_name: str
    average_score: float = 0.0
    number_of_reviews: int = 0
    last_updated_on: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class NewsArticleRecord(Record):
    title: str
    description: str = ""
    media_id: str = ""
    external_url: str = ""


@dataclass(frozen=True, kw_only=True)
class MediaRecord(Record):
    title: str
    media_url: str
    description: str = ""
    external_url: str = ""
    source_name: str = ""
    source_url: str = ""


@dataclass(frozen=True, kw_only=True)
class ProductDocumentationRecord(Record):
    foreign_key: str
    document_type: str
    document_url: str


@dataclass(frozen=True, kw_only=True)
class UserGroupRecord(Record):
    display_name: str


@dataclass(frozen=True, kw_only=True)
class SoftwareGroupRecord(Record):
    group_name: str
    group_description: str = ""


@dataclass(frozen=True, kw_only=True)
class FunctionalCategoryRecord(Record):
    """A node in the category tree; category_parent holds the parent's id."""
    category_name: str
    category_parent: str = ""


@dataclass(frozen=True, kw_only=True)
class LogRecord(Record):
    """An append-only audit entry about the record named by foreign_key."""
    foreign_key: str
    context: str
    type: str


@dataclass(frozen=True, kw_only=True)
class UserRecord(Record):
    email: str
    first_name: str
    last_name: str
    role: str
    password_hash: str = ""
    organization_id: str = ""
    avatar_url: str = ""
    mfa_enabled: bool = False
