"""Status ORM — status definitions and the log of status periods.

Invariants:
    - StatusLog.status_id references statuses.id, status_of the subject's id
    - Open-ended windows stored as NULL (active_end, status_end)
"""

from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from apm.db.base import Base, RecordMixin, UTCDateTime


class Status(RecordMixin, Base):
    """Status definition, e.g. lifecycle/production."""
    __tablename__ = "statuses"

    status_type: Mapped[str] = mapped_column(String(100), nullable=False)
    status_name: Mapped[str] = mapped_column(String(100), nullable=False)
    active_start: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
    active_end: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)


class StatusLog(RecordMixin, Base):
    """One period during which a subject held a status."""
    __tablename__ = "status_logs"

    status_id: Mapped[str] = mapped_column(String(64), nullable=False)
    status_of: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    status_start: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    status_end: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
