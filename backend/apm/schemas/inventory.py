"""Inventory Schemas — entities, software, software groups, functional categories, ranks.

Invariants:
    - software_type must be one of SoftwareType
    - Rank numbers are non-negative
"""

from datetime import datetime

from pydantic import Field

from apm.core.domain_types import SoftwareType
from apm.schemas.common import RecordResponse, RequiredText, TrimmedText, WireModel


# --- Entity ------------------------------------------------------------------

class EntityCreate(WireModel):
    display_name: RequiredText


class EntityUpdate(WireModel):
    display_name: TrimmedText | None = None


class EntityResponse(RecordResponse):
    display_name: str


# --- Software ----------------------------------------------------------------

class SoftwareCreate(WireModel):
    """Software creation — display_name and software_type are mandatory."""
    display_name: RequiredText
    software_type: SoftwareType
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


class SoftwareUpdate(WireModel):
    foreign_key: str | None = None
    display_name: TrimmedText | None = None
    description: str | None = None
    software_type: SoftwareType | None = None
    software_subtype: str | None = None
    vendor: str | None = None
    manufacturer: str | None = None
    install_type: str | None = None
    product_type: str | None = None
    context: str | None = None
    lifecycle_status: str | None = None
    implementation_status: str | None = None


class SoftwareResponse(RecordResponse):
    foreign_key: str
    display_name: str
    description: str
    software_type: str
    software_subtype: str
    vendor: str
    manufacturer: str
    install_type: str
    product_type: str
    context: str
    lifecycle_status: str
    implementation_status: str


# --- Software group ----------------------------------------------------------

class SoftwareGroupCreate(WireModel):
    group_name: RequiredText
    group_description: str = ""


class SoftwareGroupUpdate(WireModel):
    group_name: TrimmedText | None = None
    group_description: str | None = None


class SoftwareGroupResponse(RecordResponse):
    group_name: str
    group_description: str


# --- Functional category -----------------------------------------------------

class FunctionalCategoryCreate(WireModel):
    category_name: RequiredText
    category_parent: str = ""


class FunctionalCategoryUpdate(WireModel):
    category_name: TrimmedText | None = None
    category_parent: str | None = None


class FunctionalCategoryResponse(RecordResponse):
    category_name: str
    category_parent: str


# --- Rank --------------------------------------------------------------------

class RankCreate(WireModel):
    source_link: RequiredText
    source_name: RequiredText
    average_score: float = Field(0.0, ge=0)
    number_of_reviews: int = Field(0, ge=0)
    last_updated_on: datetime | None = None


class RankUpdate(WireModel):
    source_link: TrimmedText | None = None
    source_name: TrimmedText | None = None
    average_score: float | None = Field(None, ge=0)
    number_of_reviews: int | None = Field(None, ge=0)
    last_updated_on: datetime | None = None


class RankResponse(RecordResponse):
    source_link: str
    source_name: str
    average_score: float
    number_of_reviews: int
    last_updated_on: datetime | None
