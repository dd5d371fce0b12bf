"""Pydantic request/response schemas for the API."""

from app.schemas.health import HealthResponse, ReadinessErrorResponse, ReadinessResponse
from app.schemas.search import (
    ProductSummaryResponse,
    RebuildDictionaryResponse,
    RecentSearchesResponse,
    SearchResponse,
)

__all__ = [
    "HealthResponse",
    "ProductSummaryResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "RebuildDictionaryResponse",
    "RecentSearchesResponse",
    "SearchResponse",
]
