"""Search API: product search with typo correction, dictionary rebuild, recent searches."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    get_caller_identity_optional,
    get_current_identity,
    get_rebuild_dictionary_use_case,
    get_recent_searches_use_case,
    get_search_products_use_case,
    require_admin,
)
from app.application.dtos.identity import CallerIdentity
from app.application.dtos.search import SearchQuery
from app.application.use_cases.search import (
    GetRecentSearchesUseCase,
    RebuildSearchDictionaryUseCase,
    SearchProductsUseCase,
)
from app.core.limiter import limit_dictionary_rebuild
from app.schemas.search import (
    RebuildDictionaryResponse,
    RecentSearchesResponse,
    SearchResponse,
)

router = APIRouter()


@router.get("", response_model=SearchResponse)
async def search_products(
    search_use_case: Annotated[SearchProductsUseCase, Depends(get_search_products_use_case)],
    identity: Annotated[CallerIdentity | None, Depends(get_caller_identity_optional)],
    q: str = Query(..., min_length=1, max_length=500, description="Free-text query"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
):
    """Search active products by whole words; a zero-hit query is retried once with typo correction."""
    result = await search_use_case.search(SearchQuery(q=q, page=page, limit=limit), identity)
    return SearchResponse.model_validate(result)


@router.post("/update-dictionary", response_model=RebuildDictionaryResponse)
@limit_dictionary_rebuild
async def update_dictionary(
    request: Request,
    _: Annotated[CallerIdentity, Depends(require_admin)],
    use_case: Annotated[
        RebuildSearchDictionaryUseCase, Depends(get_rebuild_dictionary_use_case)
    ],
):
    """Rebuild the typo-correction dictionary from the whole catalog (admin only)."""
    result = await use_case.execute()
    return RebuildDictionaryResponse(word_count=result.word_count)


@router.get("/recent", response_model=RecentSearchesResponse)
async def recent_searches(
    identity: Annotated[CallerIdentity, Depends(get_current_identity)],
    use_case: Annotated[GetRecentSearchesUseCase, Depends(get_recent_searches_use_case)],
):
    """Recent searches of the authenticated caller, most recent first."""
    return RecentSearchesResponse(searches=await use_case.execute(identity.user_id))
