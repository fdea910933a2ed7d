from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from string_analyzer.analyzer import analyze
from string_analyzer.errors import ConflictingFilters
from string_analyzer.filters import FilterSet, apply_filters, check_conflicts, has_conflict, matches
from string_analyzer.schemas import StringRecord


def make_record(value: str) -> StringRecord:
    props = analyze(value)
    return StringRecord(
        id=props.sha256_hash,
        value=value,
        properties=props,
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def sample_record():
    return make_record("hello world")


class TestFilterSet:
    def test_absent_fields_are_not_applied(self):
        assert FilterSet().applied() == {}
        assert FilterSet().is_empty()

    def test_false_is_a_present_value(self):
        assert FilterSet(is_palindrome=False).applied() == {"is_palindrome": False}

    def test_zero_is_a_present_value(self):
        assert FilterSet(word_count=0).applied() == {"word_count": 0}

    def test_contains_character_must_be_single(self):
        with pytest.raises(ValidationError):
            FilterSet(contains_character="ab")

    def test_frozen(self):
        f = FilterSet(min_length=1)
        with pytest.raises(ValidationError):
            f.min_length = 2


class TestMatches:
    @pytest.mark.parametrize("value", ["", "a", "racecar", "hello world", "  "])
    def test_empty_filters_match_everything(self, value):
        assert matches(make_record(value), FilterSet()) is True

    def test_palindrome_filter(self, sample_record):
        assert matches(make_record("racecar"), FilterSet(is_palindrome=True)) is True
        assert matches(sample_record, FilterSet(is_palindrome=True)) is False
        assert matches(sample_record, FilterSet(is_palindrome=False)) is True

    def test_min_length_is_inclusive(self, sample_record):
        assert matches(sample_record, FilterSet(min_length=11)) is True
        assert matches(sample_record, FilterSet(min_length=12)) is False

    def test_max_length_is_inclusive(self, sample_record):
        assert matches(sample_record, FilterSet(max_length=11)) is True
        assert matches(sample_record, FilterSet(max_length=10)) is False

    def test_word_count_is_exact(self, sample_record):
        assert matches(sample_record, FilterSet(word_count=2)) is True
        assert matches(sample_record, FilterSet(word_count=1)) is False

    def test_contains_character_filter(self, sample_record):
        assert matches(sample_record, FilterSet(contains_character="h")) is True
        assert matches(sample_record, FilterSet(contains_character=" ")) is True
        assert matches(sample_record, FilterSet(contains_character="z")) is False

    def test_contains_character_is_case_sensitive(self):
        lower = make_record("banana")
        assert matches(lower, FilterSet(contains_character="a")) is True
        assert matches(lower, FilterSet(contains_character="A")) is False
        assert matches(make_record("Apple"), FilterSet(contains_character="a")) is False

    def test_combined_filters_are_anded(self, sample_record):
        ok = FilterSet(min_length=5, word_count=2, is_palindrome=False, contains_character="w")
        assert matches(sample_record, ok) is True
        # one failing field is enough to reject
        assert matches(sample_record, ok.model_copy(update={"word_count": 3})) is False
        assert matches(sample_record, ok.model_copy(update={"contains_character": "q"})) is False

    def test_apply_filters_keeps_order(self):
        records = [make_record(v) for v in ("level", "hello", "noon", "abc")]
        result = apply_filters(records, FilterSet(is_palindrome=True))
        assert [r.value for r in result] == ["level", "noon"]


class TestConflicts:
    def test_min_greater_than_max(self):
        assert has_conflict(FilterSet(min_length=10, max_length=5)) is True

    def test_min_less_than_max(self):
        assert has_conflict(FilterSet(min_length=5, max_length=10)) is False

    def test_min_equal_max(self):
        assert has_conflict(FilterSet(min_length=7, max_length=7)) is False

    def test_single_bound(self):
        assert has_conflict(FilterSet(min_length=5)) is False
        assert has_conflict(FilterSet(max_length=0)) is False

    def test_no_other_dimensions_conflict(self):
        assert has_conflict(FilterSet(min_length=50, word_count=0)) is False

    def test_check_conflicts(self):
        f = FilterSet(min_length=5)
        assert check_conflicts(f) is f
        with pytest.raises(ConflictingFilters):
            check_conflicts(FilterSet(min_length=3, max_length=2))
