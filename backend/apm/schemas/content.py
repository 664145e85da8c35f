"""Content Schemas — news articles, media and product documentation.

Invariants:
    - URL fields hold "" or an absolute http(s) URL
    - ProductDocumentation.foreign_key is fixed at creation
"""

from apm.schemas.common import (
    OptionalUrl, RecordResponse, RequiredText, RequiredUrl, TrimmedText, TrimmedUrl,
    WireModel,
)


# --- News article ------------------------------------------------------------

class NewsArticleCreate(WireModel):
    title: RequiredText
    description: str = ""
    media_id: str = ""
    external_url: OptionalUrl = ""


class NewsArticleUpdate(WireModel):
    title: TrimmedText | None = None
    description: str | None = None
    media_id: str | None = None
    external_url: OptionalUrl | None = None


class NewsArticleResponse(RecordResponse):
    title: str
    description: str
    media_id: str
    external_url: str


# --- Media -------------------------------------------------------------------

class MediaCreate(WireModel):
    title: RequiredText
    media_url: RequiredText
    description: str = ""
    external_url: OptionalUrl = ""
    source_name: str = ""
    source_url: OptionalUrl = ""


class MediaUpdate(WireModel):
    title: TrimmedText | None = None
    description: str | None = None
    media_url: TrimmedText | None = None
    external_url: OptionalUrl | None = None
    source_name: str | None = None
    source_url: OptionalUrl | None = None


class MediaResponse(RecordResponse):
    title: str
    description: str
    media_url: str
    external_url: str
    source_name: str
    source_url: str


# --- Product documentation ---------------------------------------------------

class ProductDocumentationCreate(WireModel):
    foreign_key: RequiredText
    document_type: RequiredText
    document_url: RequiredUrl


class ProductDocumentationUpdate(WireModel):
    document_type: TrimmedText | None = None
    document_url: TrimmedUrl | None = None


class ProductDocumentationResponse(RecordResponse):
    foreign_key: str
    document_type: str
    document_url: str
