"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, activity recorder).
"""

from app.application.interfaces import (
    IActivityRecorder,
    ICatalogRepository,
    ISearchDictionaryRepository,
    IUserActivityRepository,
)
from app.application.services import TypoCorrector
from app.application.use_cases import (
    GetRecentSearchesUseCase,
    RebuildSearchDictionaryUseCase,
    SearchProductsUseCase,
)

__all__ = [
    "GetRecentSearchesUseCase",
    "IActivityRecorder",
    "ICatalogRepository",
    "ISearchDictionaryRepository",
    "IUserActivityRepository",
    "RebuildSearchDictionaryUseCase",
    "SearchProductsUseCase",
    "TypoCorrector",
]
