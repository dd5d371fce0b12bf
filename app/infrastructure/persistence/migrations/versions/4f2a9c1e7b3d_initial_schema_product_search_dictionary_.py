"""Initial schema: product, product_media, search_dictionary, user_activity

Revision ID: 4f2a9c1e7b3d
Revises:
Create Date: 2026-10-18 10:12:41.503211

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "4f2a9c1e7b3d"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create initial schema."""
    # Create product table
    op.create_table(
        "product",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("brand", sa.String(length=255), nullable=False),
        sa.Column("model", sa.String(length=255), nullable=False),
        sa.Column("specifications", sa.Text(), nullable=True),
        sa.Column("tags", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("category_id", sa.String(), nullable=False),
        sa.Column("zone_id", sa.String(), nullable=False),
        sa.Column("seller_id", sa.String(), nullable=False),
        sa.Column("regular_unit_price", sa.Float(), nullable=False),
        sa.Column("pricing_tiers", postgresql.JSONB(), nullable=False, server_default="[]"),
        sa.Column("minimum_order_quantity", sa.Integer(), nullable=False),
        sa.Column("stock_quantity", sa.Integer(), nullable=False),
        sa.Column("unit", sa.String(length=50), nullable=False),
        sa.Column("sku", sa.String(length=100), nullable=True),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("dimensions", sa.String(length=255), nullable=True),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("order_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("rating", sa.Float(), nullable=False, server_default="0"),
        sa.Column("review_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("images", postgresql.JSONB(), nullable=False, server_default="[]"),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('active', 'inactive', 'archived')", name="product_status_check"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.UniqueConstraint("sku"),
    )
    op.create_index(op.f("ix_product_status"), "product", ["status"], unique=False)
    op.create_index(op.f("ix_product_category_id"), "product", ["category_id"], unique=False)
    op.create_index(op.f("ix_product_seller_id"), "product", ["seller_id"], unique=False)
    op.create_index("ix_product_brand_model", "product", ["brand", "model"], unique=False)

    # Create product_media table
    op.create_table(
        "product_media",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("product_id", sa.String(), nullable=False),
        sa.Column("url", sa.String(length=2048), nullable=False),
        sa.Column("purpose", sa.String(length=20), nullable=False),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("file_key", sa.String(length=1024), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "purpose IN ('thumbnail', 'preview')", name="product_media_purpose_check"
        ),
        sa.ForeignKeyConstraint(["product_id"], ["product.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_product_media_product_id"), "product_media", ["product_id"], unique=False
    )

    # Create search_dictionary table
    op.create_table(
        "search_dictionary",
        sa.Column("word", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("word"),
    )

    # Create user_activity table
    op.create_table(
        "user_activity",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column(
            "recent_searches", postgresql.JSONB(), nullable=False, server_default="[]"
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_user_activity_user_id"), "user_activity", ["user_id"], unique=True
    )


def downgrade() -> None:
    """Drop initial schema."""
    op.drop_index(op.f("ix_user_activity_user_id"), table_name="user_activity")
    op.drop_table("user_activity")
    op.drop_table("search_dictionary")
    op.drop_index(op.f("ix_product_media_product_id"), table_name="product_media")
    op.drop_table("product_media")
    op.drop_index("ix_product_brand_model", table_name="product")
    op.drop_index(op.f("ix_product_seller_id"), table_name="product")
    op.drop_index(op.f("ix_product_category_id"), table_name="product")
    op.drop_index(op.f("ix_product_status"), table_name="product")
    op.drop_table("product")
