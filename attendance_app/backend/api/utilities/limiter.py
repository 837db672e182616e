# attendance_app/backend/api/utilities/limiter.py

from fastapi import Request

from slowapi import Limiter
from slowapi.util import get_remote_address

from ...config.config import settings

def get_limiter_key(request: Request) -> str:
    """
    Returns the rate limit key of a request.
    Behind a proxy the leftmost X-Forwarded-For hop is the real client,
    otherwise the socket peer address is used.
    """
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip
    return get_remote_address(request)

# memory:// keeps counters per process; point RATE_LIMIT_STORAGE_URL at a shared store for several replicas.
limiter = Limiter(key_func=get_limiter_key, storage_uri=settings.RATE_LIMIT_STORAGE_URL)
