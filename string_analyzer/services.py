from datetime import datetime, timezone
from typing import Any, Dict, Optional

from string_analyzer.analyzer import analyze, compute_sha256
from string_analyzer.errors import InvalidFilter, StringAlreadyExists, StringNotFound
from string_analyzer.filters import FilterSet, apply_filters, has_conflict
from string_analyzer.nlp import interpret
from string_analyzer.schemas import StringRecord
from string_analyzer.store import StringStore


def create_string(value: str, store: StringStore) -> StringRecord:
    props = analyze(value)
    record = StringRecord(
        id=props.sha256_hash,
        value=value,
        properties=props,
        created_at=datetime.now(timezone.utc),
    )
    if not store.insert_if_absent(record):
        raise StringAlreadyExists("String already exists in the system")
    return record


def get_string_by_value(string_value: str, store: StringStore) -> StringRecord:
    """Lookup record by hashing the exact provided string value."""
    record = store.get(compute_sha256(string_value))
    if record is None:
        raise StringNotFound(f"String '{string_value}' not found")
    return record


def delete_string_by_value(string_value: str, store: StringStore) -> None:
    if not store.delete(compute_sha256(string_value)):
        raise StringNotFound(f"String '{string_value}' not found")


def validate_query_filters(
    is_palindrome: Optional[bool] = None,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    word_count: Optional[int] = None,
    contains_character: Optional[str] = None,
) -> FilterSet:
    for name, val in (("min_length", min_length), ("max_length", max_length), ("word_count", word_count)):
        if val is not None and val < 0:
            raise InvalidFilter(f"{name} must be non-negative")

    if contains_character is not None and len(contains_character) != 1:
        raise InvalidFilter("contains_character must be a single character")

    filters = FilterSet(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    if has_conflict(filters):
        raise InvalidFilter("min_length cannot be greater than max_length")
    return filters


def get_all_strings_with_filters(store: StringStore, filters: FilterSet) -> Dict[str, Any]:
    records = apply_filters(store.all_records(), filters)
    return {
        "data": records,
        "count": len(records),
        "filters_applied": filters.applied(),
    }


def get_strings_by_natural_language(store: StringStore, query: str) -> Dict[str, Any]:
    result = interpret(query)
    records = apply_filters(store.all_records(), result.filters)
    return {
        "data": records,
        "count": len(records),
        "interpreted_query": {
            "original": result.original,
            "parsed_filters": result.filters.applied(),
            "matched_phrases": dict(result.phrases),
        },
    }
