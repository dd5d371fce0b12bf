"""SearchProductsUseCase and dictionary use case unit tests with mocked repos."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.application.dtos.identity import CallerIdentity
from app.application.dtos.search import SearchableText, SearchQuery
from app.application.use_cases.search import (
    GetRecentSearchesUseCase,
    RebuildSearchDictionaryUseCase,
    SearchProductsUseCase,
)
from app.domain.enums import ActivityType, UserRole
from app.domain.exceptions import ValidationException


async def _agen(items):
    for item in items:
        yield item


@pytest.fixture
def catalog_repo():
    repo = AsyncMock()
    repo.search_active = AsyncMock(return_value=([], 0))
    return repo


@pytest.fixture
def dictionary_repo():
    repo = AsyncMock()
    repo.list_words = AsyncMock(return_value=["galaxy", "phone", "samsung"])
    return repo


@pytest.fixture
def recorder():
    return MagicMock()


@pytest.fixture
def service(catalog_repo, dictionary_repo, recorder) -> SearchProductsUseCase:
    return SearchProductsUseCase(catalog_repo, dictionary_repo, activity_recorder=recorder)


async def test_hits_are_returned_without_correction(service, catalog_repo, dictionary_repo) -> None:
    product = MagicMock()
    catalog_repo.search_active.return_value = ([product], 1)

    result = await service.search(SearchQuery(q="galaxy phone"))

    assert result.data == [product]
    assert result.total == 1
    assert result.suggestion is None
    catalog_repo.search_active.assert_awaited_once_with(["galaxy", "phone"], skip=0, limit=20)
    dictionary_repo.list_words.assert_not_awaited()


async def test_zero_hits_retries_once_with_corrected_query(service, catalog_repo) -> None:
    product = MagicMock()
    catalog_repo.search_active.side_effect = [([], 0), ([product], 1)]

    result = await service.search(SearchQuery(q="galxy phone"))

    assert result.suggestion == "Did you mean: galaxy phone"
    assert result.data == [product]
    assert result.total == 1
    assert catalog_repo.search_active.await_count == 2
    assert catalog_repo.search_active.await_args_list[1].args[0] == ["galaxy", "phone"]


async def test_corrected_query_with_no_hits_still_carries_suggestion(service, catalog_repo) -> None:
    result = await service.search(SearchQuery(q="galxy"))

    assert result.total == 0
    assert result.suggestion == "Did you mean: galaxy"
    assert catalog_repo.search_active.await_count == 2


async def test_zero_hits_without_correction_returns_initial_result(service, catalog_repo) -> None:
    result = await service.search(SearchQuery(q="phone"))

    assert result.total == 0
    assert result.data == []
    assert result.suggestion is None
    catalog_repo.search_active.assert_awaited_once()


async def test_dictionary_failure_degrades_to_no_suggestion(
    service, catalog_repo, dictionary_repo
) -> None:
    dictionary_repo.list_words.side_effect = RuntimeError("connection reset")

    result = await service.search(SearchQuery(q="galxy"))

    assert result.total == 0
    assert result.suggestion is None
    catalog_repo.search_active.assert_awaited_once()


async def test_catalog_errors_propagate(service, catalog_repo) -> None:
    catalog_repo.search_active.side_effect = RuntimeError("db down")
    with pytest.raises(RuntimeError, match="db down"):
        await service.search(SearchQuery(q="phone"))


@pytest.mark.parametrize(
    ("page", "limit", "total", "has_next", "has_prev"),
    [
        (1, 20, 45, True, False),
        (2, 20, 45, True, True),
        (3, 20, 45, False, True),
        (1, 20, 20, False, False),
    ],
)
async def test_pagination_flags(service, catalog_repo, page, limit, total, has_next, has_prev) -> None:
    catalog_repo.search_active.return_value = ([MagicMock()], total)

    result = await service.search(SearchQuery(q="phone", page=page, limit=limit))

    assert result.has_next_page is has_next
    assert result.has_prev_page is has_prev
    catalog_repo.search_active.assert_awaited_once_with(
        ["phone"], skip=(page - 1) * limit, limit=limit
    )


@pytest.mark.parametrize(
    "query",
    [
        SearchQuery(q="   "),
        SearchQuery(q=""),
        SearchQuery(q="phone", page=0),
        SearchQuery(q="phone", limit=0),
        SearchQuery(q="phone", limit=101),
        SearchQuery(q="x" * 501),
    ],
)
async def test_invalid_queries_are_rejected_before_store_access(
    service, catalog_repo, recorder, query
) -> None:
    with pytest.raises(ValidationException):
        await service.search(query)
    catalog_repo.search_active.assert_not_awaited()
    recorder.record.assert_not_called()


async def test_search_by_customer_is_recorded(service, recorder) -> None:
    identity = CallerIdentity(user_id="u1", role=UserRole.CUSTOMER)

    await service.search(SearchQuery(q="Galaxy Phone"), identity)

    recorder.record.assert_called_once_with("u1", ActivityType.SEARCH, {"query": "Galaxy Phone"})


async def test_admin_and_anonymous_searches_are_not_recorded(service, recorder) -> None:
    await service.search(SearchQuery(q="phone"))
    await service.search(
        SearchQuery(q="phone"), CallerIdentity(user_id="a1", role=UserRole.ADMIN)
    )
    recorder.record.assert_not_called()


async def test_recorder_failure_does_not_fail_search(service, catalog_repo, recorder) -> None:
    recorder.record.side_effect = RuntimeError("no event loop")
    catalog_repo.search_active.return_value = ([MagicMock()], 1)

    result = await service.search(
        SearchQuery(q="phone"), CallerIdentity(user_id="u1", role=UserRole.SELLER)
    )

    assert result.total == 1


async def test_rebuild_collects_unique_words_from_every_product() -> None:
    catalog_repo = MagicMock()
    catalog_repo.iter_searchable_text = lambda: _agen(
        [
            SearchableText(name="Galaxy Phone", brand="Samsung", tags=["android"]),
            SearchableText(name="Phone Case", description="Fits galaxy models"),
        ]
    )
    dictionary_repo = AsyncMock()
    dictionary_repo.replace_all = AsyncMock(side_effect=lambda words: len(words))

    result = await RebuildSearchDictionaryUseCase(catalog_repo, dictionary_repo).execute()

    expected = sorted(
        ["android", "case", "fits", "galaxy", "models", "phone", "samsung"]
    )
    dictionary_repo.replace_all.assert_awaited_once_with(expected)
    assert result.word_count == len(expected)


async def test_rebuild_with_empty_catalog_writes_nothing() -> None:
    catalog_repo = MagicMock()
    catalog_repo.iter_searchable_text = lambda: _agen([])
    dictionary_repo = AsyncMock()

    result = await RebuildSearchDictionaryUseCase(catalog_repo, dictionary_repo).execute()

    dictionary_repo.replace_all.assert_awaited_once_with([])
    assert result.word_count == 0


async def test_recent_searches_use_case_delegates() -> None:
    activity_repo = AsyncMock()
    activity_repo.get_recent_searches = AsyncMock(return_value=["phone"])

    assert await GetRecentSearchesUseCase(activity_repo).execute("u1") == ["phone"]
    activity_repo.get_recent_searches.assert_awaited_once_with("u1")
