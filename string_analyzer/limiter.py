import logging
from typing import Any, Optional, cast

from fastapi import FastAPI
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from string_analyzer.config import settings

logger = logging.getLogger("string_analyzer.limiter")


def default_limit() -> str:
    return f"{settings.RATE_LIMIT} per {settings.RATE_LIMIT_WINDOW} seconds"


def create_limiter() -> Limiter:
    try:
        return Limiter(
            key_func=get_remote_address,
            default_limits=[default_limit()],
            storage_uri=settings.REDIS_URL or "memory://",
            enabled=settings.RATE_LIMIT_ENABLED,
        )
    except Exception:
        logger.exception("Failed to create slowapi Limiter")
        raise


limiter = create_limiter()


def get_middleware() -> Any:
    return SlowAPIMiddleware


def install(app: FastAPI, app_limiter: Optional[Limiter] = None) -> Limiter:
    """Apply the default limit to every route of ``app`` and answer 429 past it."""
    app_limiter = app_limiter or limiter
    app.state.limiter = app_limiter
    app.add_middleware(cast(Any, get_middleware()))
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    logger.info(
        "Rate limit %s (%s)",
        default_limit(),
        "enabled" if app_limiter.enabled else "disabled",
    )
    return app_limiter
