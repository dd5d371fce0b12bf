"""Search dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.typo_corrector import TypoCorrector
from app.application.use_cases.search import (
    GetRecentSearchesUseCase,
    RebuildSearchDictionaryUseCase,
    SearchProductsUseCase,
)
from app.core.config import get_settings
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import (
    ProductRepository,
    SearchDictionaryRepository,
    UserActivityRepository,
)
from app.infrastructure.services import BackgroundActivityRecorder


def get_activity_recorder(request: Request) -> BackgroundActivityRecorder | None:
    """Activity recorder created at startup (None when the app runs without lifespan)."""
    return getattr(request.app.state, "activity_recorder", None)


async def get_search_products_use_case(
    db: Annotated[AsyncSession, Depends(get_db)],
    recorder: Annotated[BackgroundActivityRecorder | None, Depends(get_activity_recorder)],
) -> SearchProductsUseCase:
    """Search use case (read-only session; activity written by the recorder)."""
    settings = get_settings()
    return SearchProductsUseCase(
        catalog_repo=ProductRepository(db),
        dictionary_repo=SearchDictionaryRepository(db),
        typo_corrector=TypoCorrector(
            max_distance=settings.search_max_correction_distance,
            min_token_length=settings.search_min_correctable_length,
        ),
        activity_recorder=recorder,
        max_limit=settings.search_max_limit,
        max_query_length=settings.search_max_query_length,
    )


async def get_rebuild_dictionary_use_case(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> RebuildSearchDictionaryUseCase:
    """Dictionary rebuild use case (delete and insert in one transaction)."""
    settings = get_settings()
    return RebuildSearchDictionaryUseCase(
        catalog_repo=ProductRepository(db),
        dictionary_repo=SearchDictionaryRepository(
            db, batch_size=settings.search_dictionary_batch_size
        ),
    )


async def get_recent_searches_use_case(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> GetRecentSearchesUseCase:
    """Recent searches of the caller (read-only)."""
    return GetRecentSearchesUseCase(
        UserActivityRepository(db, max_recent=get_settings().recent_searches_max)
    )
