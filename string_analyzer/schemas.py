from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StringRequest(BaseModel):
    """Request schema for creating/analyzing a string."""
    value: str = Field(..., description="String to analyze")


class StringProperties(BaseModel):
    """Computed properties of an analyzed string."""
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    """A stored string, keyed by the SHA-256 of its value."""
    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime


class InterpretedQuery(BaseModel):
    original: str = Field(..., description="Query text exactly as received")
    parsed_filters: Dict[str, Any] = Field(..., description="Structured filters derived from the query")
    matched_phrases: Dict[str, str] = Field(
        default_factory=dict,
        description="Source phrase that set each parsed filter",
    )


class FilterResponse(BaseModel):
    """Response schema for filtered results."""
    data: List[StringRecord]
    count: int
    filters_applied: Optional[Dict[str, Any]] = None
    interpreted_query: Optional[InterpretedQuery] = None
