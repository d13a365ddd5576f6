"""Unit tests for the word query functions."""

from collections import deque

from roster.core import word_queries
from roster.core.word_queries import (
    DEFAULT_WORDS,
    all_of,
    compare_lengths,
    even_length,
    non_null_even_length,
    sort_by_comparator,
    sort_by_length,
    sort_naturally,
    word_lengths,
)


class TestSorting:
    """Test the sorting helpers."""

    def test_sort_by_length_is_stable(self) -> None:
        assert sort_by_length(DEFAULT_WORDS) == ["a", "is", "of", "this", "list", "strings"]

    def test_comparator_sort_matches_key_sort(self) -> None:
        assert sort_by_comparator(DEFAULT_WORDS) == sort_by_length(DEFAULT_WORDS)

    def test_custom_comparator(self) -> None:
        longest_first = sort_by_comparator(DEFAULT_WORDS, lambda a, b: compare_lengths(b, a))
        assert longest_first == ["strings", "this", "list", "is", "of", "a"]

    def test_compare_lengths_sign(self) -> None:
        assert compare_lengths("a", "of") < 0
        assert compare_lengths("list", "this") == 0
        assert compare_lengths("strings", "a") > 0

    def test_sort_naturally(self) -> None:
        assert sort_naturally(DEFAULT_WORDS) == ["a", "is", "list", "of", "strings", "this"]

    def test_input_is_not_mutated(self) -> None:
        words = ["this", "is", "a"]
        sort_by_length(words)
        sort_naturally(words)
        assert words == ["this", "is", "a"]


class TestFiltering:
    """Test filters and predicate combination."""

    def test_even_length(self) -> None:
        assert even_length(DEFAULT_WORDS) == ["this", "is", "list", "of"]

    def test_even_length_into_other_container(self) -> None:
        collected = even_length(DEFAULT_WORDS, factory=deque)
        assert isinstance(collected, deque)
        assert list(collected) == ["this", "is", "list", "of"]

    def test_non_null_even_length(self) -> None:
        words = ["this", "is", None, "a", None, "list", "of", None, "strings"]
        assert non_null_even_length(words) == ["this", "is", "list", "of"]

    def test_all_of_short_circuits(self) -> None:
        calls: list[str] = []

        def first(value: object) -> bool:
            calls.append("first")
            return False

        def second(value: object) -> bool:
            calls.append("second")
            return True

        assert all_of(first, second)("x") is False
        assert calls == ["first"]

    def test_all_of_with_no_predicates_accepts(self) -> None:
        assert all_of()("anything") is True


class TestWordLengths:
    """Test the word-to-length mapping."""

    def test_word_lengths(self) -> None:
        assert word_lengths(DEFAULT_WORDS) == {
            "this": 4,
            "is": 2,
            "a": 1,
            "list": 4,
            "of": 2,
            "strings": 7,
        }

    def test_duplicates_collapse(self) -> None:
        assert word_lengths(["a", "a"]) == {"a": 1}

    def test_module_default_is_immutable(self) -> None:
        assert isinstance(word_queries.DEFAULT_WORDS, tuple)
