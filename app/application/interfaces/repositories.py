"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.search import ProductSummary, SearchableText


# Catalog repository interface (read-only from the search service)
class ICatalogRepository(Protocol):
    """Protocol for the product catalog as seen by search (DIP)."""

    async def search_active(
        self, terms: Sequence[str], skip: int, limit: int
    ) -> tuple[list[ProductSummary], int]:
        """Return (page of active products matching every term as a whole word, total matches)."""

    def iter_searchable_text(self) -> AsyncIterator[SearchableText]:
        """Yield the six searchable text fields of every product (any status)."""


# Search dictionary repository interface
class ISearchDictionaryRepository(Protocol):
    """Protocol for the search dictionary store (owned by the search service)."""

    async def replace_all(self, words: Sequence[str]) -> int:
        """Delete every entry then insert words (duplicates ignored). Returns words attempted."""

    async def list_words(self) -> list[str]:
        """Return all dictionary words in a stable order."""


# User activity repository interface
class IUserActivityRepository(Protocol):
    """Protocol for per-user activity (recent searches)."""

    async def add_recent_search(self, user_id: str, query: str) -> list[str]:
        """Move query to the front of the user's recent searches. Returns the new list."""

    async def get_recent_searches(self, user_id: str) -> list[str]:
        """Return the user's recent searches, most recent first."""
