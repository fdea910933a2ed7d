import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from string_analyzer import limiter as limiter_module
from string_analyzer.config import settings
from string_analyzer.logging import RequestLoggingMiddleware, init_logging
from string_analyzer.routes import router

init_logging()
logger = logging.getLogger("string_analyzer")

app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)
limiter_module.install(app)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    path = request.url.path
    is_post_strings = request.method == "POST" and path.endswith("/strings")
    is_get_with_query = request.method == "GET" and path.endswith("/strings")
    is_get_nl_filter = request.method == "GET" and path.endswith("/strings/filter-by-natural-language")

    errors = exc.errors()
    if is_post_strings:
        # Missing required field or invalid JSON -> 400, wrong type -> 422
        missing = any(
            (err.get("type") in {"missing", "field_required"}) or
            ("field required" in str(err.get("msg", "")).lower())
            for err in errors
        )
        json_invalid = any(
            (err.get("type") in {"json_invalid", "value_error.jsondecode"}) or
            ("json decode error" in str(err.get("msg", "")).lower())
            for err in errors
        )
        status = 400 if (missing or json_invalid) else 422
    elif is_get_with_query or is_get_nl_filter:
        status = 400
    else:
        status = 422

    logger.warning(
        "ValidationError: %s %s -> %s | errors=%s",
        request.method,
        path,
        status,
        errors,
    )
    return JSONResponse(status_code=status, content={"detail": jsonable_encoder(errors)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def run() -> None:
    uvicorn.run("string_analyzer.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
