"""Structured filter predicates shared by the explicit and natural-language endpoints."""
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from string_analyzer.errors import ConflictingFilters
from string_analyzer.schemas import StringRecord


class FilterSet(BaseModel):
    """Zero or more constraints on stored records.

    A field left as ``None`` places no constraint on that dimension.
    """
    model_config = ConfigDict(frozen=True)

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = Field(None, min_length=1, max_length=1)

    def applied(self) -> Dict[str, Any]:
        """Return only the constraints that are present."""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.applied()


def matches(record: StringRecord, filters: FilterSet) -> bool:
    """True iff the record satisfies every present constraint."""
    props = record.properties

    if filters.is_palindrome is not None and props.is_palindrome != filters.is_palindrome:
        return False

    if filters.min_length is not None and props.length < filters.min_length:
        return False

    if filters.max_length is not None and props.length > filters.max_length:
        return False

    if filters.word_count is not None and props.word_count != filters.word_count:
        return False

    # Exact, case-sensitive test against the raw value
    if filters.contains_character is not None and filters.contains_character not in record.value:
        return False

    return True


def apply_filters(records: Iterable[StringRecord], filters: FilterSet) -> List[StringRecord]:
    return [r for r in records if matches(r, filters)]


def has_conflict(filters: FilterSet) -> bool:
    """Detect constraints that no record could satisfy together.

    The only recognised contradiction is ``min_length > max_length``.
    """
    if filters.min_length is not None and filters.max_length is not None:
        return filters.min_length > filters.max_length
    return False


def check_conflicts(filters: FilterSet) -> FilterSet:
    if has_conflict(filters):
        raise ConflictingFilters(filters.applied())
    return filters
