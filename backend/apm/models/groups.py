"""Grouping ORM — user groups, software groups and the functional category tree.

Invariants:
    - FunctionalCategory.category_parent holds the parent's id or "" for a root category
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from apm.db.base import Base, RecordMixin


class UserGroup(RecordMixin, Base):
    __tablename__ = "user_groups"

    display_name: Mapped[str] = mapped_column(String(255), nullable=False)


class SoftwareGroup(RecordMixin, Base):
    __tablename__ = "software_groups"

    group_name: Mapped[str] = mapped_column(String(255), nullable=False)
    group_description: Mapped[str] = mapped_column(Text, nullable=False, default="")


class FunctionalCategory(RecordMixin, Base):
    __tablename__ = "functional_categories"

    category_name: Mapped[str] = mapped_column(String(255), nullable=False)
    category_parent: Mapped[str] = mapped_column(String(64), nullable=False, default="")
