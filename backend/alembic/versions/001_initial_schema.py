"""Initial schema — inventory collections and users.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Table name → extra indexed columns (created_at is indexed everywhere)
_INDEXED = {
    "entities": (),
    "software": (),
    "stakeholders": ("user_id",),
    "statuses": (),
    "status_logs": ("status_of",),
    "ranks": (),
    "news_articles": (),
    "media": (),
    "product_documentation": ("foreign_key",),
    "user_groups": (),
    "software_groups": (),
    "functional_categories": (),
    "logs": ("foreign_key",),
    "users": (),
}


def _record_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _optional_text(name: str, type_=None) -> sa.Column:
    return sa.Column(name, type_ or sa.Text, nullable=False, server_default="")


def upgrade() -> None:
    op.create_table(
        "entities", *_record_columns(),
        sa.Column("display_name", sa.String(255), nullable=False),
    )

    op.create_table(
        "software", *_record_columns(),
        _optional_text("foreign_key", sa.String(64)),
        sa.Column("display_name", sa.String(255), nullable=False),
        _optional_text("description"),
        sa.Column("software_type", sa.String(20), nullable=False),
        _optional_text("software_subtype", sa.String(100)),
        _optional_text("vendor", sa.String(255)),
        _optional_text("manufacturer", sa.String(255)),
        _optional_text("install_type", sa.String(100)),
        _optional_text("product_type", sa.String(100)),
        _optional_text("context"),
        _optional_text("lifecycle_status", sa.String(100)),
        _optional_text("implementation_status", sa.String(100)),
    )

    op.create_table(
        "stakeholders", *_record_columns(),
        _optional_text("foreign_key", sa.String(64)),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("role", sa.String(100), nullable=False),
    )

    op.create_table(
        "statuses", *_record_columns(),
        sa.Column("status_type", sa.String(100), nullable=False),
        sa.Column("status_name", sa.String(100), nullable=False),
        sa.Column("active_start", sa.DateTime(timezone=True), nullable=True),
        sa.Column("active_end", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "status_logs", *_record_columns(),
        sa.Column("status_id", sa.String(64), nullable=False),
        sa.Column("status_of", sa.String(64), nullable=False),
        sa.Column("status_start", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status_end", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "ranks", *_record_columns(),
        sa.Column("source_link", sa.String(2000), nullable=False),
        sa.Column("source_name", sa.String(255), nullable=False),
        sa.Column("average_score", sa.Float, nullable=False, server_default="0"),
        sa.Column("number_of_reviews", sa.Integer, nullable=False, server_default="0"),
        sa.Column("last_updated_on", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "news_articles", *_record_columns(),
        sa.Column("title", sa.String(500), nullable=False),
        _optional_text("description"),
        _optional_text("media_id", sa.String(64)),
        _optional_text("external_url", sa.String(2000)),
    )

    op.create_table(
        "media", *_record_columns(),
        sa.Column("title", sa.String(500), nullable=False),
        _optional_text("description"),
        sa.Column("media_url", sa.String(2000), nullable=False),
        _optional_text("external_url", sa.String(2000)),
        _optional_text("source_name", sa.String(255)),
        _optional_text("source_url", sa.String(2000)),
    )

    op.create_table(
        "product_documentation", *_record_columns(),
        sa.Column("foreign_key", sa.String(64), nullable=False),
        sa.Column("document_type", sa.String(100), nullable=False),
        sa.Column("document_url", sa.String(2000), nullable=False),
    )

    op.create_table(
        "user_groups", *_record_columns(),
        sa.Column("display_name", sa.String(255), nullable=False),
    )

    op.create_table(
        "software_groups", *_record_columns(),
        sa.Column("group_name", sa.String(255), nullable=False),
        _optional_text("group_description"),
    )

    op.create_table(
        "functional_categories", *_record_columns(),
        sa.Column("category_name", sa.String(255), nullable=False),
        _optional_text("category_parent", sa.String(64)),
    )

    op.create_table(
        "logs", *_record_columns(),
        sa.Column("foreign_key", sa.String(64), nullable=False),
        sa.Column("context", sa.Text, nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
    )

    op.create_table(
        "users", *_record_columns(),
        _optional_text("organization_id", sa.String(64)),
        sa.Column("email", sa.String(320), nullable=False, unique=True),
        _optional_text("password_hash", sa.String(255)),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("role", sa.String(50), nullable=False),
        _optional_text("avatar_url", sa.String(2000)),
        sa.Column("mfa_enabled", sa.Boolean, nullable=False, server_default="false"),
    )

    for table, columns in _INDEXED.items():
        for column in ("created_at", *columns):
            op.create_index(f"ix_{table}_{column}", table, [column])


def downgrade() -> None:
    for table, columns in _INDEXED.items():
        for column in ("created_at", *columns):
            op.drop_index(f"ix_{table}_{column}", table_name=table)
    for table in reversed(list(_INDEXED)):
        op.drop_table(table)
