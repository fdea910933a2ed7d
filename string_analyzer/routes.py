import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from string_analyzer.config import settings
from string_analyzer.errors import (
    ConflictingFilters,
    InvalidFilter,
    StringAlreadyExists,
    StringNotFound,
    TranslationFailed,
)
from string_analyzer.schemas import FilterResponse, StringRecord, StringRequest
from string_analyzer.services import (
    create_string,
    delete_string_by_value,
    get_all_strings_with_filters,
    get_string_by_value,
    get_strings_by_natural_language,
    validate_query_filters,
)
from string_analyzer.store import StringStore, get_store

router = APIRouter()
logger = logging.getLogger("string_analyzer.routes")


@router.get("/")
def root() -> dict:
    return {
        "message": settings.APP_TITLE,
        "version": settings.APP_VERSION,
        "endpoints": {
            "POST /strings": "Analyze and store a string",
            "GET /strings/{string_value}": "Get specific string analysis",
            "GET /strings": "Get all strings with optional filters",
            "GET /strings/filter-by-natural-language": "Filter using natural language",
            "DELETE /strings/{string_value}": "Delete a string",
        },
    }


@router.get("/health")
def health() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok"}


@router.post("/strings", response_model=StringRecord, status_code=201)
def create_string_endpoint(payload: StringRequest, store: StringStore = Depends(get_store)) -> StringRecord:
    """Create and analyze a string."""
    try:
        return create_string(payload.value, store)
    except StringAlreadyExists as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get(
    "/strings/filter-by-natural-language",
    response_model=FilterResponse,
    response_model_exclude_none=True,
)
def filter_by_natural_language(
    query: str = Query(..., description="Natural language query"),
    store: StringStore = Depends(get_store),
) -> dict:
    """Filter strings using a natural language query.

    Example: "all single word palindromic strings"
    """
    try:
        return get_strings_by_natural_language(store, query)
    except TranslationFailed as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConflictingFilters as e:
        logger.info("conflicting filters for query %r: %s", query, e.filters)
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/strings/{string_value}", response_model=StringRecord)
def get_string_endpoint(string_value: str, store: StringStore = Depends(get_store)) -> StringRecord:
    """Get a specific string by its raw value."""
    try:
        return get_string_by_value(string_value, store)
    except StringNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/strings", response_model=FilterResponse, response_model_exclude_none=True)
def get_all_strings(
    is_palindrome: Optional[bool] = Query(None),
    min_length: Optional[int] = Query(None),
    max_length: Optional[int] = Query(None),
    word_count: Optional[int] = Query(None),
    contains_character: Optional[str] = Query(None),
    store: StringStore = Depends(get_store),
) -> dict:
    """Get all strings with optional filtering."""
    try:
        filters = validate_query_filters(is_palindrome, min_length, max_length, word_count, contains_character)
    except InvalidFilter as e:
        raise HTTPException(status_code=400, detail=str(e))
    return get_all_strings_with_filters(store, filters)


@router.delete("/strings/{string_value}", status_code=204)
def delete_string_endpoint(string_value: str, store: StringStore = Depends(get_store)) -> None:
    """Delete a string by its raw value."""
    try:
        delete_string_by_value(string_value, store)
    except StringNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
