"""Search API schemas (camelCase on the wire)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )


class ProductMediaResponse(_CamelModel):
    """Thumbnail or preview media item."""

    id: str
    url: str
    purpose: str
    priority: int


class PricingTierResponse(_CamelModel):
    min_quantity: int
    price_per_unit: float
    max_quantity: int | None = None


class ProductSummaryResponse(_CamelModel):
    """Public product as returned by search."""

    id: str
    name: str
    description: str
    brand: str
    model: str
    specifications: str | None = None
    tags: list[str] = Field(default_factory=list)
    status: str
    category_id: str
    zone_id: str
    seller_id: str
    regular_unit_price: float
    pricing_tiers: list[PricingTierResponse] = Field(default_factory=list)
    minimum_order_quantity: int
    stock_quantity: int
    unit: str
    sku: str | None = None
    weight: float | None = None
    dimensions: str | None = None
    view_count: int
    rating: float
    review_count: int
    thumbnail: ProductMediaResponse | None = None
    previews: list[ProductMediaResponse] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SearchResponse(_CamelModel):
    """One page of search results. suggestion is present only when a typo correction was applied."""

    data: list[ProductSummaryResponse]
    total: int
    page: int
    limit: int
    has_next_page: bool
    has_prev_page: bool
    suggestion: str | None = Field(
        default=None, description='e.g. "Did you mean: galaxy phone"'
    )

    @model_serializer(mode="wrap")
    def _omit_absent_suggestion(self, handler):
        data = handler(self)
        if self.suggestion is None:
            data.pop("suggestion", None)
        return data


class RebuildDictionaryResponse(_CamelModel):
    """Response for POST /search/update-dictionary."""

    word_count: int = Field(..., description="Unique words written to the dictionary")


class RecentSearchesResponse(_CamelModel):
    """Response for GET /search/recent (most recent first)."""

    searches: list[str]
