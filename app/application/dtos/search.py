"""DTOs for catalog search and the search dictionary (no dependency on ORM)."""

from dataclasses import dataclass, field, replace
from datetime import datetime

from app.domain.enums import ProductMediaPurpose


@dataclass(frozen=True)
class SearchQuery:
    """Validated search input: free text, 1-based page, page size."""

    q: str
    page: int = 1
    limit: int = 20


@dataclass(frozen=True)
class ProductMediaSummary:
    """Public media item (thumbnail or preview)."""

    id: str
    url: str
    purpose: ProductMediaPurpose
    priority: int


@dataclass(frozen=True)
class PricingTierSummary:
    """Quantity-based price tier."""

    min_quantity: int
    price_per_unit: float
    max_quantity: int | None = None


@dataclass(frozen=True)
class ProductSummary:
    """Public read-model of a product (internal counters and raw media stripped)."""

    id: str
    name: str
    description: str
    brand: str
    model: str
    specifications: str | None
    tags: list[str]
    status: str
    category_id: str
    zone_id: str
    seller_id: str
    regular_unit_price: float
    pricing_tiers: list[PricingTierSummary]
    minimum_order_quantity: int
    stock_quantity: int
    unit: str
    sku: str | None
    weight: float | None
    dimensions: str | None
    view_count: int
    rating: float
    review_count: int
    thumbnail: ProductMediaSummary | None
    previews: list[ProductMediaSummary]
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class SearchResultPage:
    """One page of search results.

    total counts every match before pagination. suggestion is set only when
    the results come from a corrected query.
    """

    data: list[ProductSummary]
    total: int
    page: int
    limit: int
    has_next_page: bool
    has_prev_page: bool
    suggestion: str | None = None

    def with_suggestion(self, suggestion: str) -> "SearchResultPage":
        return replace(self, suggestion=suggestion)


@dataclass(frozen=True)
class DictionaryRebuildResult:
    """Outcome of a dictionary rebuild: number of unique words written."""

    word_count: int


@dataclass(frozen=True)
class SearchableText:
    """Projection of the six searchable product fields (dictionary input)."""

    name: str | None = None
    description: str | None = None
    brand: str | None = None
    model: str | None = None
    specifications: str | None = None
    tags: list[str] = field(default_factory=list)
