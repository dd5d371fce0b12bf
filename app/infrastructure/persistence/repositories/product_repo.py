"""Product catalog repository as seen by search: whole-word matching and public mapping."""

from __future__ import annotations

import re
from collections.abc import AsyncIterator, Sequence

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from app.application.dtos.search import (
    PricingTierSummary,
    ProductMediaSummary,
    ProductSummary,
    SearchableText,
)
from app.domain.enums import ProductMediaPurpose, ProductStatus
from app.infrastructure.persistence.models.product import Product, ProductMedia
from app.shared.utils.datetime import ensure_utc

# Text columns matched by search; tags are matched element by element.
SEARCHABLE_FIELDS = ("name", "description", "brand", "model", "specifications")

# Set-returning function that unnests a JSON array of strings, per dialect.
_TAG_ELEMENTS = {
    "postgresql": func.jsonb_array_elements_text,
    "sqlite": func.json_each,
}


def whole_word_pattern(term: str) -> str:
    """Case-insensitive regex matching term as a whole word (metacharacters escaped).

    A word boundary is the start/end of the value or any non-alphanumeric
    character, so "c++" matches in "c++ compiler" but "phone" does not match
    "smartphone".
    """
    return f"(?i)(^|[^A-Za-z0-9]){re.escape(term)}([^A-Za-z0-9]|$)"


def _any_tag_matches(pattern: str, dialect: str) -> ColumnElement[bool]:
    """EXISTS over the product's tag elements; JSON syntax itself is never matched."""
    elements = _TAG_ELEMENTS.get(dialect, func.jsonb_array_elements_text)
    tag = elements(Product.tags).table_valued("value", name="tag", joins_implicitly=True)
    return select(tag.c.value).where(tag.c.value.regexp_match(pattern)).exists()


def build_match_predicate(
    terms: Sequence[str], dialect: str = "postgresql"
) -> ColumnElement[bool]:
    """Active products where every term matches at least one searchable field."""
    clauses: list[ColumnElement[bool]] = [Product.status == ProductStatus.ACTIVE.value]
    for term in terms:
        pattern = whole_word_pattern(term)
        fields = [getattr(Product, name).regexp_match(pattern) for name in SEARCHABLE_FIELDS]
        fields.append(_any_tag_matches(pattern, dialect))
        clauses.append(or_(*fields))
    return and_(*clauses)


def _media_summary(media: ProductMedia) -> ProductMediaSummary:
    return ProductMediaSummary(
        id=str(media.id),
        url=media.url,
        purpose=ProductMediaPurpose(media.purpose),
        priority=media.priority,
    )


def to_public_summary(product: Product) -> ProductSummary:
    """Map a Product row to its public shape.

    Internal counters (order_count) and legacy image URLs are dropped. Media is
    ordered by priority; thumbnail is the first thumbnail item, previews are
    every preview item.
    """
    ordered = sorted(product.media or [], key=lambda m: m.priority)
    thumbnail = next(
        (m for m in ordered if m.purpose == ProductMediaPurpose.THUMBNAIL.value), None
    )
    previews = [m for m in ordered if m.purpose == ProductMediaPurpose.PREVIEW.value]
    tiers = [
        PricingTierSummary(
            min_quantity=int(t.get("min_quantity", t.get("minQuantity", 1))),
            price_per_unit=float(t.get("price_per_unit", t.get("pricePerUnit", 0))),
            max_quantity=t.get("max_quantity", t.get("maxQuantity")),
        )
        for t in (product.pricing_tiers or [])
    ]
    return ProductSummary(
        id=str(product.id),
        name=product.name,
        description=product.description,
        brand=product.brand,
        model=product.model,
        specifications=product.specifications,
        tags=list(product.tags or []),
        status=product.status,
        category_id=str(product.category_id),
        zone_id=str(product.zone_id),
        seller_id=str(product.seller_id),
        regular_unit_price=product.regular_unit_price,
        pricing_tiers=tiers,
        minimum_order_quantity=product.minimum_order_quantity,
        stock_quantity=product.stock_quantity,
        unit=product.unit,
        sku=product.sku,
        weight=product.weight,
        dimensions=product.dimensions,
        view_count=product.view_count,
        rating=product.rating,
        review_count=product.review_count,
        thumbnail=_media_summary(thumbnail) if thumbnail else None,
        previews=[_media_summary(m) for m in previews],
        created_at=ensure_utc(product.created_at),
        updated_at=ensure_utc(product.updated_at),
    )


class ProductRepository:
    """Read-only product queries used by search and the dictionary builder."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def search_active(
        self, terms: Sequence[str], skip: int, limit: int
    ) -> tuple[list[ProductSummary], int]:
        """Return (page of matching active products, total matches).

        Rows come back in insertion order (created_at, then id). Page and count
        run one after another on the same session.
        """
        predicate = build_match_predicate(terms, self.db.get_bind().dialect.name)
        stmt = (
            select(Product)
            .where(predicate)
            .order_by(Product.created_at, Product.id)
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        products = list(result.scalars().all())
        count_result = await self.db.execute(
            select(func.count()).select_from(Product).where(predicate)
        )
        total = int(count_result.scalar_one())
        return [to_public_summary(p) for p in products], total

    async def iter_searchable_text(self) -> AsyncIterator[SearchableText]:
        """Yield the six searchable fields of every product, regardless of status."""
        stmt = select(
            Product.name,
            Product.description,
            Product.brand,
            Product.model,
            Product.specifications,
            Product.tags,
        ).execution_options(yield_per=500)
        result = await self.db.stream(stmt)
        async for row in result:
            yield SearchableText(
                name=row.name,
                description=row.description,
                brand=row.brand,
                model=row.model,
                specifications=row.specifications,
                tags=list(row.tags or []),
            )
