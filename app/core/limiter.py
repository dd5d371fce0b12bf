"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limit strings come from settings.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def _dictionary_rebuild_limit() -> str:
    return get_settings().dictionary_rebuild_limit


limit_dictionary_rebuild = limiter.limit(_dictionary_rebuild_limit)
