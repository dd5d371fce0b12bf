"""Presentation-layer dependency injection (composition root).

Routes depend only on these dependencies, never on infrastructure directly.
"""

from app.api.v1.dependencies.auth import (
    get_caller_identity_optional,
    get_current_identity,
    require_admin,
)
from app.api.v1.dependencies.db import get_db, get_db_transactional
from app.api.v1.dependencies.search import (
    get_activity_recorder,
    get_rebuild_dictionary_use_case,
    get_recent_searches_use_case,
    get_search_products_use_case,
)

__all__ = [
    "get_activity_recorder",
    "get_caller_identity_optional",
    "get_current_identity",
    "get_db",
    "get_db_transactional",
    "get_rebuild_dictionary_use_case",
    "get_recent_searches_use_case",
    "get_search_products_use_case",
    "require_admin",
]
