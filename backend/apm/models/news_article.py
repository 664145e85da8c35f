"""NewsArticle ORM — press and announcements about portfolio software."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from apm.db.base import Base, RecordMixin


class NewsArticle(RecordMixin, Base):
    __tablename__ = "news_articles"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    media_id: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    external_url: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
