"""Stakeholder ORM — a user's role on a piece of software or an entity.

Invariants:
    - user_id references users.id; integrity left to the caller (no FK constraint)
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from apm.db.base import Base, RecordMixin


class Stakeholder(RecordMixin, Base):
    __tablename__ = "stakeholders"

    foreign_key: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    role: Mapped[str] = mapped_column(String(100), nullable=False)
