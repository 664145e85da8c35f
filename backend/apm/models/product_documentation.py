"""ProductDocumentation ORM — links to manuals, runbooks and contracts for software."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from apm.db.base import Base, RecordMixin


class ProductDocumentation(RecordMixin, Base):
    __tablename__ = "product_documentation"

    foreign_key: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    document_type: Mapped[str] = mapped_column(String(100), nullable=False)
    document_url: Mapped[str] = mapped_column(String(2000), nullable=False)
