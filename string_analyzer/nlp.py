"""Natural-language to filter translation.

The translator is a fixed, ordered library of pattern rules. Every rule that
matches the lower-cased query contributes its fields to the result, and a
later rule reassigns any field an earlier one already set. Evaluation order
never changes, so identical input always yields identical filters.
"""
import logging
import re
from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Callable, Dict, Mapping, Tuple, Union

from string_analyzer.errors import TranslationFailed
from string_analyzer.filters import FilterSet, check_conflicts

logger = logging.getLogger("string_analyzer.nlp")

VOWELS = ("a", "e", "i", "o", "u")
ORDINALS = ("first", "second", "third", "fourth", "fifth")

# Numbers are capped at nine digits. A longer digit run does not match.
NUMBER = r"(\d{1,9})"


@dataclass(frozen=True)
class Rule:
    name: str
    pattern: re.Pattern
    effect: Callable[[re.Match], Dict[str, Any]]


@dataclass(frozen=True)
class Interpreted:
    """A successful translation and the phrase behind each parsed field."""
    original: str
    filters: FilterSet
    phrases: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class NoMatch:
    original: str


Translation = Union[Interpreted, NoMatch]


def _n(m: re.Match) -> int:
    return int(m.group(1))


def _vowel_rule(index: int) -> Rule:
    ordinal = ORDINALS[index]
    vowel = VOWELS[index]
    return Rule(
        name=f"{ordinal}_vowel",
        pattern=re.compile(re.escape(f"{ordinal} vowel")),
        effect=lambda m: {"contains_character": vowel},
    )


RULES: Tuple[Rule, ...] = (
    Rule(
        "palindrome",
        re.compile(r"palindrom(?:e|ic)"),
        lambda m: {"is_palindrome": True},
    ),
    Rule(
        "single_word",
        re.compile(r"\b(?:single|one)\s+word\b"),
        lambda m: {"word_count": 1},
    ),
    Rule(
        "two_words",
        re.compile(r"\b(?:two|2)\s+words?\b"),
        lambda m: {"word_count": 2},
    ),
    Rule(
        "n_words",
        re.compile(r"\b" + NUMBER + r"\s+words?\b"),
        lambda m: {"word_count": _n(m)},
    ),
    Rule(
        "longer_than",
        re.compile(r"\b(?:longer|more)\s+than\s+" + NUMBER + r"(?:\s+characters?)?\b"),
        lambda m: {"min_length": _n(m) + 1},
    ),
    Rule(
        "shorter_than",
        re.compile(r"\b(?:shorter|less)\s+than\s+" + NUMBER + r"(?:\s+characters?)?\b"),
        lambda m: {"max_length": _n(m) - 1},
    ),
    Rule(
        "at_least",
        re.compile(r"\bat\s+least\s+" + NUMBER + r"(?:\s+characters?)?\b"),
        lambda m: {"min_length": _n(m)},
    ),
    Rule(
        "exactly",
        re.compile(r"\bexactly\s+" + NUMBER + r"(?:\s+characters?)?\b"),
        lambda m: {"min_length": _n(m), "max_length": _n(m)},
    ),
    Rule(
        "contains_letter",
        re.compile(r"\bcontain(?:s|ing)?\s+(?:the\s+)?letter\s+([a-z])\b"),
        lambda m: {"contains_character": m.group(1)},
    ),
    Rule(
        "with_letter",
        re.compile(r"\bwith\s+(?:the\s+)?letter\s+([a-z])\b"),
        lambda m: {"contains_character": m.group(1)},
    ),
) + tuple(_vowel_rule(i) for i in range(len(ORDINALS)))


_State = Tuple[FilterSet, Mapping[str, str]]


def _apply_rule(text: str) -> Callable[[_State, Rule], _State]:
    def step(state: _State, rule: Rule) -> _State:
        m = rule.pattern.search(text)
        if not m:
            return state
        updates = rule.effect(m)
        logger.debug("rule %s matched %r -> %s", rule.name, m.group(0), updates)
        filters, phrases = state
        new_phrases = dict(phrases)
        new_phrases.update({key: m.group(0) for key in updates})
        return filters.model_copy(update=updates), new_phrases

    return step


def translate(text: str) -> Translation:
    """Translate free text into a FilterSet, or report that nothing matched."""
    if not isinstance(text, str):
        raise TypeError("query must be a string")

    q = text.lower()
    filters, phrases = reduce(_apply_rule(q), RULES, (FilterSet(), {}))
    if filters.is_empty():
        return NoMatch(original=text)
    return Interpreted(original=text, filters=filters, phrases=phrases)


def interpret(text: str) -> Interpreted:
    """Translate and validate a query, raising on either failure outcome."""
    result = translate(text)
    if isinstance(result, NoMatch):
        logger.info("no pattern matched query %r", text)
        raise TranslationFailed(text)
    check_conflicts(result.filters)
    return result
