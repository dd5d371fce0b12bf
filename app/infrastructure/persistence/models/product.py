"""Product ORM models. Catalog entries and their media (read-only for search)."""

from typing import Any

from sqlalchemy import Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.domain.enums import ProductStatus
from app.infrastructure.persistence.database import Base, JsonDocument
from app.infrastructure.persistence.models.mixins import CuidTimestampModel


class Product(CuidTimestampModel, Base):
    """Product entity. Table: product. Owned by the catalog; search only reads it."""

    __tablename__ = "product"

    name: Mapped[str] = mapped_column(String(500), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    brand: Mapped[str] = mapped_column(String(255), nullable=False)
    model: Mapped[str] = mapped_column(String(255), nullable=False)
    specifications: Mapped[str | None] = mapped_column(Text, nullable=True)
    tags: Mapped[list[str]] = mapped_column(JsonDocument, nullable=False, default=list)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ProductStatus.ACTIVE.value, index=True
    )

    category_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    zone_id: Mapped[str] = mapped_column(String, nullable=False)
    seller_id: Mapped[str] = mapped_column(String, nullable=False, index=True)

    regular_unit_price: Mapped[float] = mapped_column(Float, nullable=False)
    pricing_tiers: Mapped[list[dict[str, Any]]] = mapped_column(
        JsonDocument, nullable=False, default=list
    )
    minimum_order_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    unit: Mapped[str] = mapped_column(String(50), nullable=False)
    sku: Mapped[str | None] = mapped_column(String(100), unique=True, nullable=True)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    dimensions: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Internal counters and legacy image URLs; not exposed publicly.
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    order_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    images: Mapped[list[str]] = mapped_column(JsonDocument, nullable=False, default=list)

    media: Mapped[list["ProductMedia"]] = relationship(
        back_populates="product",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="ProductMedia.priority",
    )

    __table_args__ = (Index("ix_product_brand_model", "brand", "model"),)


class ProductMedia(CuidTimestampModel, Base):
    """Media item attached to a product. Table: product_media."""

    __tablename__ = "product_media"

    product_id: Mapped[str] = mapped_column(
        String, ForeignKey("product.id", ondelete="CASCADE"), nullable=False, index=True
    )
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    purpose: Mapped[str] = mapped_column(String(20), nullable=False)
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    file_key: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    product: Mapped[Product] = relationship(back_populates="media")
