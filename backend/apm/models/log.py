"""Log ORM — append-only audit entries; rows are created and deleted, never updated."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from apm.db.base import Base, RecordMixin


class Log(RecordMixin, Base):
    __tablename__ = "logs"

    foreign_key: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    context: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
