import hashlib
from collections import Counter
from typing import Dict

from string_analyzer.schemas import StringProperties


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hex digest of a string's UTF-8 bytes."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def is_palindrome(text: str) -> bool:
    """Check if string is a palindrome, ignoring case and all whitespace."""
    cleaned = "".join(text.lower().split())
    return cleaned == cleaned[::-1]


def count_unique_characters(text: str) -> int:
    return len(set(text))


def count_words(text: str) -> int:
    """Count maximal runs of non-whitespace; empty or blank text has zero words."""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    return dict(Counter(text))


def analyze(value: str) -> StringProperties:
    """Analyze a string and return all computed properties."""
    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=get_character_frequency(value),
    )
