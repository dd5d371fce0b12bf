"""Catalog search use cases: search with typo correction, dictionary rebuild, recent searches."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.search import (
    DictionaryRebuildResult,
    SearchQuery,
    SearchResultPage,
)
from app.application.services.search_text import (
    collect_dictionary_words,
    split_query_terms,
)
from app.application.services.typo_corrector import TypoCorrector
from app.domain.enums import ActivityType
from app.domain.exceptions import ValidationException
from app.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from app.application.dtos.identity import CallerIdentity
    from app.application.interfaces.repositories import (
        ICatalogRepository,
        ISearchDictionaryRepository,
        IUserActivityRepository,
    )
    from app.application.interfaces.services import IActivityRecorder

logger = logging.getLogger(__name__)

DEFAULT_MAX_LIMIT = 100
DEFAULT_MAX_QUERY_LENGTH = 500
SUGGESTION_PREFIX = "Did you mean: "


class SearchProductsUseCase:
    """Product search: run the query; if nothing matches, retry once with a corrected query.

    Only active products are searched. When a correction is applied the
    returned page carries suggestion "Did you mean: <corrected>". Searches by
    known non-admin callers are recorded as activity without waiting for the write.
    """

    def __init__(
        self,
        catalog_repo: "ICatalogRepository",
        dictionary_repo: "ISearchDictionaryRepository",
        typo_corrector: TypoCorrector | None = None,
        activity_recorder: "IActivityRecorder | None" = None,
        max_limit: int = DEFAULT_MAX_LIMIT,
        max_query_length: int = DEFAULT_MAX_QUERY_LENGTH,
    ) -> None:
        self.catalog_repo = catalog_repo
        self.dictionary_repo = dictionary_repo
        self.typo_corrector = typo_corrector or TypoCorrector()
        self.activity_recorder = activity_recorder
        self.max_limit = max_limit
        self.max_query_length = max_query_length

    @traced("search.products")
    async def search(
        self, query: SearchQuery, identity: "CallerIdentity | None" = None
    ) -> SearchResultPage:
        """Search active products; attach a suggestion when a typo correction was used."""
        self._validate(query)
        self._track_search(query.q, identity)

        result = await self.perform_search(query.q, query.page, query.limit)
        add_span_attributes(**{"search.total": result.total})
        if result.total > 0:
            return result

        corrected = await self.find_correction(query.q)
        if corrected is None:
            return result
        logger.info(
            'Original query "%s" had no results. Trying suggestion "%s".',
            query.q,
            corrected,
        )
        corrected_result = await self.perform_search(corrected, query.page, query.limit)
        add_span_attributes(
            **{"search.corrected": True, "search.corrected_total": corrected_result.total}
        )
        return corrected_result.with_suggestion(f"{SUGGESTION_PREFIX}{corrected}")

    async def perform_search(self, text: str, page: int, limit: int) -> SearchResultPage:
        """Single search attempt for the literal text (no correction)."""
        terms = split_query_terms(text)
        skip = (page - 1) * limit
        products, total = await self.catalog_repo.search_active(terms, skip=skip, limit=limit)
        return SearchResultPage(
            data=products,
            total=total,
            page=page,
            limit=limit,
            has_next_page=page * limit < total,
            has_prev_page=page > 1,
        )

    async def find_correction(self, text: str) -> str | None:
        """Corrected query from the dictionary, or None.

        Any failure while loading the dictionary or correcting degrades to None.
        """
        try:
            dictionary = await self.dictionary_repo.list_words()
            return self.typo_corrector.find_correction(text, dictionary)
        except Exception:
            logger.exception("Typo correction failed for query %r", text)
            return None

    def _validate(self, query: SearchQuery) -> None:
        if not query.q or not query.q.strip():
            raise ValidationException("Search query must not be blank", field="q")
        if len(query.q) > self.max_query_length:
            raise ValidationException(
                f"Search query must be at most {self.max_query_length} characters",
                field="q",
            )
        if query.page < 1:
            raise ValidationException("page must be at least 1", field="page")
        if not 1 <= query.limit <= self.max_limit:
            raise ValidationException(
                f"limit must be between 1 and {self.max_limit}", field="limit"
            )

    def _track_search(self, q: str, identity: "CallerIdentity | None") -> None:
        """Record a search event for known non-admin callers; never raises."""
        if identity is None or identity.is_admin or self.activity_recorder is None:
            return
        try:
            self.activity_recorder.record(
                identity.user_id, ActivityType.SEARCH, {"query": q}
            )
        except Exception:
            logger.exception("Failed to track search activity for user %s", identity.user_id)


class RebuildSearchDictionaryUseCase:
    """Rebuild the search dictionary from every product (active or not).

    Expensive; meant for admins or a periodic job, never the request hot path.
    """

    def __init__(
        self,
        catalog_repo: "ICatalogRepository",
        dictionary_repo: "ISearchDictionaryRepository",
    ) -> None:
        self.catalog_repo = catalog_repo
        self.dictionary_repo = dictionary_repo

    @traced("search.rebuild_dictionary")
    async def execute(self) -> DictionaryRebuildResult:
        logger.info("Starting search dictionary update...")
        words: set[str] = set()
        async for item in self.catalog_repo.iter_searchable_text():
            words |= collect_dictionary_words([item])
        await self.dictionary_repo.replace_all(sorted(words))
        logger.info("Dictionary update complete. Total unique words: %d", len(words))
        add_span_attributes(**{"search.dictionary_words": len(words)})
        return DictionaryRebuildResult(word_count=len(words))


class GetRecentSearchesUseCase:
    """Recent searches of the calling user, most recent first."""

    def __init__(self, activity_repo: "IUserActivityRepository") -> None:
        self.activity_repo = activity_repo

    async def execute(self, user_id: str) -> list[str]:
        return await self.activity_repo.get_recent_searches(user_id)
