"""Software ORM — one application in the portfolio.

Invariants:
    - software_type holds a SoftwareType value
    - Optional descriptive columns are non-nullable and default to "" (empty means absent)
    - foreign_key optionally points at the owning entity; not enforced by a constraint
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from apm.db.base import Base, RecordMixin


class Software(RecordMixin, Base):
    """Software entity — an application tracked by the inventory."""
    __tablename__ = "software"

    foreign_key: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    software_type: Mapped[str] = mapped_column(String(20), nullable=False)
    software_subtype: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    vendor: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    manufacturer: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    install_type: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    product_type: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    context: Mapped[str] = mapped_column(Text, nullable=False, default="")
    lifecycle_status: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    implementation_status: Mapped[str] = mapped_column(
        String(100), nullable=False, default="",
    )
