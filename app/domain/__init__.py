"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import ActivityType, ProductMediaPurpose, ProductStatus, UserRole
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    DictionaryRebuildException,
    MarketplaceException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    # Enums
    "ActivityType",
    "ProductMediaPurpose",
    "ProductStatus",
    "UserRole",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "DictionaryRebuildException",
    "MarketplaceException",
    "SqlNotConfiguredException",
    "ValidationException",
]
