"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. The people routes read their limit from
settings on each request, so tests can change it via env + cache_clear().
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def _people_rate_limit() -> str:
    return get_settings().people_rate_limit


limit_people = limiter.limit(_people_rate_limit)
