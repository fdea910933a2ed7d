import importlib.util
import logging
import time
from logging.config import dictConfig

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from string_analyzer.config import settings

COLORLOG_AVAILABLE = importlib.util.find_spec("colorlog") is not None

LOG_LEVEL = settings.LOG_LEVEL.upper()
NLP_LOG_LEVEL = settings.NLP_LOG_LEVEL.upper()

# Paths whose query string is part of the request log line
QUERY_LOGGED_PATHS = ("/strings", "/strings/filter-by-natural-language")

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {"format": LOG_FORMAT},
        "color": (
            {
                "()": "colorlog.ColoredFormatter",
                "format": "%(log_color)s" + LOG_FORMAT,
                "log_colors": {
                    "DEBUG": "cyan",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "bold_red",
                },
            }
            if COLORLOG_AVAILABLE
            else {"format": LOG_FORMAT}
        ),
        "translator": {"format": "[%(asctime)s] %(levelname)s [nlp] %(message)s"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "color" if COLORLOG_AVAILABLE else "default",
            "level": settings.CONSOLE_LOG_LEVEL.upper(),
        },
        # Own handler so rule traces are not cut by CONSOLE_LOG_LEVEL
        "translator": {
            "class": "logging.StreamHandler",
            "formatter": "translator",
            "level": NLP_LOG_LEVEL,
        },
    },
    "loggers": {
        "uvicorn": {"level": "WARNING"},
        "uvicorn.error": {"level": "WARNING"},
        "uvicorn.access": {"level": "WARNING"},
        "string_analyzer": {
            "level": LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        },
        "string_analyzer.request": {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
        "string_analyzer.nlp": {
            "level": NLP_LOG_LEVEL,
            "handlers": ["translator"],
            "propagate": False,
        },
    },
    "root": {
        "level": LOG_LEVEL,
        "handlers": ["console"],
    },
}


def init_logging() -> None:
    dictConfig(LOGGING_CONFIG)


def describe_request(request: Request) -> str:
    """Render the request target, keeping the query string for filter endpoints."""
    path = request.url.path
    if request.url.query and path in QUERY_LOGGED_PATHS:
        return f"{path}?{request.url.query}"
    return path


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        logger = logging.getLogger("string_analyzer.request")
        start_time = time.time()

        response = await call_next(request)

        duration = (time.time() - start_time) * 1000
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s -> %s (%.2f ms)",
            request.method,
            describe_request(request),
            response.status_code,
            duration,
        )
        return response
