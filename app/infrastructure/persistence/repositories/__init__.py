"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.product_repo import (
    ProductRepository,
    to_public_summary,
)
from app.infrastructure.persistence.repositories.search_dictionary_repo import (
    SearchDictionaryRepository,
)
from app.infrastructure.persistence.repositories.user_activity_repo import (
    UserActivityRepository,
)

__all__ = [
    "ProductRepository",
    "SearchDictionaryRepository",
    "UserActivityRepository",
    "to_public_summary",
]
