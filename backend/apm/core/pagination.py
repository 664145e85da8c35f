"""Pagination — bounds applied to every list operation.

Invariants:
    - limit is always within [1, MAX_LIMIT]; non-positive or missing -> DEFAULT_LIMIT
    - offset is always within [0, MAX_OFFSET] (a signed 64-bit integer)
    - Both the HTTP layer and the service layer clamp; neither trusts its caller
"""

from dataclasses import dataclass

DEFAULT_LIMIT = 10
MAX_LIMIT = 100
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class Page:
    limit: int
    offset: int


def clamp_page(limit: int | None, offset: int | None) -> Page:
    """Clamp caller-supplied pagination to the service bounds."""
    if limit is None or limit <= 0:
        limit = DEFAULT_LIMIT
    elif limit > MAX_LIMIT:
        limit = MAX_LIMIT
    if offset is None or offset < 0:
        offset = 0
    elif offset > MAX_OFFSET:
        offset = MAX_OFFSET
    return Page(limit=limit, offset=offset)


def parse_page(raw_limit: str | None, raw_offset: str | None) -> Page:
    """Parse query-string pagination leniently, then clamp.

    Unparsable values fall back to the defaults instead of failing the request.
    """
    return clamp_page(_parse_int(raw_limit, DEFAULT_LIMIT), _parse_int(raw_offset, 0))


def _parse_int(raw: str | None, default: int) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default
