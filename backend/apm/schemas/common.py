"""Shared Schema Building Blocks — base classes, field types and envelopes.

Invariants:
    - RequiredText is stripped and non-empty; TrimmedText is stripped and may be empty
    - Update schemas type create-required text as TrimmedText, so whitespace-only
      values reach the merge as ""
    - OptionalUrl accepts "" (absent) or an absolute http(s) URL, kept verbatim
    - ListEnvelope.count always equals len(data)
"""

from datetime import datetime
from typing import Annotated, Generic, TypeVar

from pydantic import (
    AfterValidator, BaseModel, ConfigDict, HttpUrl, StringConstraints, TypeAdapter,
    ValidationError,
)

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    if value:
        try:
            _http_url.validate_python(value)
        except ValidationError:
            raise ValueError(f"invalid URL: {value!r}")
    return value


RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
TrimmedText = Annotated[str, StringConstraints(strip_whitespace=True)]
OptionalUrl = Annotated[str, AfterValidator(_check_url)]
RequiredUrl = Annotated[RequiredText, AfterValidator(_check_url)]
TrimmedUrl = Annotated[TrimmedText, AfterValidator(_check_url)]


class WireModel(BaseModel):
    """Base for request bodies: enum members arrive as their plain values."""
    model_config = ConfigDict(use_enum_values=True)


class RecordResponse(BaseModel):
    """Identity and timestamps present on every resource response."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime


T = TypeVar("T")


class ListEnvelope(BaseModel, Generic[T]):
    """Paginated list response."""
    data: list[T]
    limit: int
    offset: int
    count: int


class ErrorResponse(BaseModel):
    """Error envelope returned by every failed request."""
    error: str
    message: str
    code: int
