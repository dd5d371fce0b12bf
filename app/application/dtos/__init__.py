"""Application DTOs (no ORM dependency)."""

from app.application.dtos.identity import CallerIdentity
from app.application.dtos.search import (
    DictionaryRebuildResult,
    PricingTierSummary,
    ProductMediaSummary,
    ProductSummary,
    SearchableText,
    SearchQuery,
    SearchResultPage,
)

__all__ = [
    "CallerIdentity",
    "DictionaryRebuildResult",
    "PricingTierSummary",
    "ProductMediaSummary",
    "ProductSummary",
    "SearchQuery",
    "SearchResultPage",
    "SearchableText",
]
