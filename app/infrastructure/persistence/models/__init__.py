"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    CuidTimestampModel,
    TimestampMixin,
)
from app.infrastructure.persistence.models.product import Product, ProductMedia
from app.infrastructure.persistence.models.search_dictionary import SearchDictionaryWord
from app.infrastructure.persistence.models.user_activity import UserActivity

__all__ = [
    "CuidMixin",
    "CuidTimestampModel",
    "Product",
    "ProductMedia",
    "SearchDictionaryWord",
    "TimestampMixin",
    "UserActivity",
]
