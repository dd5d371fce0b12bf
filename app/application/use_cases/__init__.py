"""Application use cases: one entry point per workflow."""

from app.application.use_cases.search import (
    GetRecentSearchesUseCase,
    RebuildSearchDictionaryUseCase,
    SearchProductsUseCase,
)

__all__ = [
    "GetRecentSearchesUseCase",
    "RebuildSearchDictionaryUseCase",
    "SearchProductsUseCase",
]
