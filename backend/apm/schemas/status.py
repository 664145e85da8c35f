"""Status Schemas — status definitions, status logs and audit logs.

Invariants:
    - StatusLog subject (status_id, status_of) is fixed at creation; only the period moves
    - Logs are append-only: there is no LogUpdate
"""

from datetime import datetime

from apm.schemas.common import RecordResponse, RequiredText, TrimmedText, WireModel


# --- Status ------------------------------------------------------------------

class StatusCreate(WireModel):
    status_type: RequiredText
    status_name: RequiredText
    active_start: datetime | None = None
    active_end: datetime | None = None


class StatusUpdate(WireModel):
    status_type: TrimmedText | None = None
    status_name: TrimmedText | None = None
    active_start: datetime | None = None
    active_end: datetime | None = None


class StatusResponse(RecordResponse):
    status_type: str
    status_name: str
    active_start: datetime | None
    active_end: datetime | None


# --- Status log --------------------------------------------------------------

class StatusLogCreate(WireModel):
    status_id: RequiredText
    status_of: RequiredText
    status_start: datetime
    status_end: datetime | None = None


class StatusLogUpdate(WireModel):
    status_start: datetime | None = None
    status_end: datetime | None = None


class StatusLogResponse(RecordResponse):
    status_id: str
    status_of: str
    status_start: datetime
    status_end: datetime | None


# --- Log ---------------------------------------------------------------------

class LogCreate(WireModel):
    foreign_key: RequiredText
    context: RequiredText
    type: RequiredText


class LogResponse(RecordResponse):
    foreign_key: str
    context: str
    type: str
