"""Entity ORM — organizations, vendors and business units that own or supply software."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from apm.db.base import Base, RecordMixin


class Entity(RecordMixin, Base):
    __tablename__ = "entities"

    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
