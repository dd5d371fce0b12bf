"""Domain enumerations for the marketplace search service.

Enums represent fixed sets of domain values (product status, roles, media purpose).
"""

from enum import Enum


class ProductStatus(str, Enum):
    """Product lifecycle status. Only ACTIVE products are visible to search."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    ARCHIVED = "archived"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]


class ProductMediaPurpose(str, Enum):
    """Purpose of a product media item in the public listing."""

    THUMBNAIL = "thumbnail"
    PREVIEW = "preview"


class UserRole(str, Enum):
    """Caller role carried in the access token."""

    ADMIN = "admin"
    SELLER = "seller"
    CUSTOMER = "customer"


class ActivityType(str, Enum):
    """User activity events recorded by the service."""

    SEARCH = "search"
