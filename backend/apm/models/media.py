"""Media ORM — screenshots, videos and other assets attached to software or news."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from apm.db.base import Base, RecordMixin


class Media(RecordMixin, Base):
    __tablename__ = "media"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    media_url: Mapped[str] = mapped_column(String(2000), nullable=False)
    external_url: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
    source_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    source_url: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
