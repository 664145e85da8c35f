"""Rank ORM — external ratings (review sites, analyst scores) for software."""

from datetime import datetime

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from apm.db.base import Base, RecordMixin, UTCDateTime


class Rank(RecordMixin, Base):
    __tablename__ = "ranks"

    source_link: Mapped[str] = mapped_column(String(2000), nullable=False)
    source_name: Mapped[str] = mapped_column(String(255), nullable=False)
    average_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    number_of_reviews: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_updated_on: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
