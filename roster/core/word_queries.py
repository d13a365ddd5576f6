"""Small query operations over a list of words.

Independent of the member dataset. Every function is pure: inputs are
never mutated and a new collection is always returned.
"""

from collections.abc import Callable, Iterable, Sequence
from functools import cmp_to_key
from typing import Any

DEFAULT_WORDS: tuple[str, ...] = ("this", "is", "a", "list", "of", "strings")


def compare_lengths(first: str, second: str) -> int:
    """Three-way comparison of two words by length."""
    return len(first) - len(second)


def sort_by_length(words: Iterable[str]) -> list[str]:
    """Stable ascending sort by word length."""
    return sorted(words, key=len)


def sort_by_comparator(
    words: Iterable[str], comparator: Callable[[str, str], int] = compare_lengths
) -> list[str]:
    """Sort using a two-argument comparator instead of a key function."""
    return sorted(words, key=cmp_to_key(comparator))


def sort_naturally(words: Iterable[str]) -> list[str]:
    return sorted(words)


def _is_even_length(word: str) -> bool:
    return len(word) % 2 == 0


def _is_present(word: Any) -> bool:
    return word is not None


def even_length(
    words: Iterable[str], factory: Callable[[Iterable[str]], Any] = list
) -> Any:
    """Words of even length, collected into whatever factory builds.

    Example:
        >>> from collections import deque
        >>> even_length(["this", "is", "a"], factory=deque)
        deque(['this', 'is'])
    """
    return factory(w for w in words if _is_even_length(w))


def all_of(*predicates: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Combine predicates with logical AND, short-circuiting left to right."""

    def combined(value: Any) -> bool:
        return all(predicate(value) for predicate in predicates)

    return combined


def non_null_even_length(words: Iterable[str | None]) -> list[str]:
    """Drop missing entries, then keep the even-length words."""
    keep = all_of(_is_present, _is_even_length)
    return [w for w in words if keep(w)]


def word_lengths(words: Sequence[str]) -> dict[str, int]:
    """Map each word to its length. Repeated words collapse to one key."""
    return {word: len(word) for word in words}
