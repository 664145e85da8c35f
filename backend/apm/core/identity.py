"""Identity & Clock — record identifiers and write timestamps.

Invariants:
    - Identifiers are 16 bytes from the OS CSPRNG, hex encoded (32 chars)
    - A failing random source raises IdentityGenerationError; there is no weaker fallback
    - Timestamps are timezone-aware UTC
    - next_write_time() never returns a value <= the previous write time
"""

import secrets
from datetime import datetime, timedelta, timezone

from apm.core.domain_types import RecordId
from apm.core.errors import IdentityGenerationError

ID_BYTES = 16

_TICK = timedelta(microseconds=1)


def generate_id() -> RecordId:
    """Return a new random record identity."""
    try:
        return RecordId(secrets.token_hex(ID_BYTES))
    except (NotImplementedError, OSError) as e:
        raise IdentityGenerationError(str(e)) from e


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def next_write_time(previous: datetime | None) -> datetime:
    """Current UTC time, bumped past `previous` when the clock has not advanced."""
    now = utc_now()
    if previous is not None and now <= previous:
        return previous + _TICK
    return now
