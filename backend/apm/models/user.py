"""User ORM — people who log in and act as stakeholders.

Invariants:
    - email is unique
    - password_hash is never exposed through a response schema
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from apm.db.base import Base, RecordMixin


class User(RecordMixin, Base):
    __tablename__ = "users"

    organization_id: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    avatar_url: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
    mfa_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
