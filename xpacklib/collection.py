"""Small collections: a non-overwriting hash map, a scored sorted set and
set algebra over sets and sorted sequences."""

from __future__ import annotations

import bisect
from collections.abc import Hashable, Iterable, Iterator, Sequence
from typing import Any

_END = object()


class HashMap:
    """A dictionary whose :meth:`set` never replaces an existing value."""

    def __init__(self) -> None:
        self._items: dict[Hashable, Any] = {}

    def set(self, key: Hashable, value: Any) -> bool:
        """Store ``value`` unless ``key`` is present; report whether it was stored."""
        if key in self._items:
            return False
        self._items[key] = value
        return True

    def update(self, key: Hashable, value: Any) -> bool:
        """Store ``value`` under ``key``, replacing any previous value."""
        self._items.pop(key, None)
        return self.set(key, value)

    def get(self, key: Hashable, default: Any = None) -> Any:
        """The value under ``key``, or ``default`` when absent."""
        return self._items.get(key, default)

    def all_values(self) -> list[Any]:
        """Every stored value."""
        return list(self._items.values())

    def all_keys(self) -> list[Hashable]:
        """Every stored key."""
        return list(self._items)

    def keys_for_value(self, value: Any) -> list[Hashable]:
        """Every key whose value equals ``value``."""
        return [key for key, stored in self._items.items() if stored == value]

    def first_key(self) -> Hashable | None:
        """Some key of the map, or ``None`` when it is empty."""
        return next(iter(self._items), None)

    def has_key(self, key: Hashable) -> bool:
        """Whether ``key`` is present."""
        return key in self._items

    def remove(self, key: Hashable) -> bool:
        """Delete ``key``; report whether it was present."""
        if key in self._items:
            del self._items[key]
            return True
        return False

    def clear(self) -> None:
        """Remove every entry."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[Hashable, Any]]:
        """Yield ``(key, value)`` pairs."""
        return iter(list(self._items.items()))


class SortedSet:
    """Unique values kept in ascending order of score, then of value."""

    def __init__(self) -> None:
        self._scores: dict[Hashable, float] = {}
        self._order: list[tuple[float, Any]] = []

    def update(self, value: Hashable, score: float) -> None:
        """Add ``value`` with ``score``, or move it to its new score."""
        old = self._scores.get(value, _END)
        if old is not _END:
            if old == score:
                return
            self._discard_entry(old, value)
        bisect.insort(self._order, (score, value))
        self._scores[value] = score

    def _discard_entry(self, score: float, value: Hashable) -> None:
        position = bisect.bisect_left(self._order, (score, value))
        del self._order[position]

    def remove(self, value: Hashable) -> None:
        """Delete ``value``; nothing happens when it is absent."""
        score = self._scores.pop(value, _END)
        if score is not _END:
            self._discard_entry(score, value)

    def pop_first(self) -> None:
        """Drop the lowest-scored value; nothing happens when empty."""
        if self._order:
            _, value = self._order.pop(0)
            del self._scores[value]

    def pop_last(self) -> None:
        """Drop the highest-scored value; nothing happens when empty."""
        if self._order:
            _, value = self._order.pop()
            del self._scores[value]

    def __contains__(self, value: object) -> bool:
        return value in self._scores

    def clear(self) -> None:
        """Remove every value."""
        self._scores.clear()
        self._order.clear()

    def __len__(self) -> int:
        return len(self._order)

    def min_score(self) -> float:
        """The lowest score, or 0 when empty."""
        return self._order[0][0] if self._order else 0

    def max_score(self) -> float:
        """The highest score, or 0 when empty."""
        return self._order[-1][0] if self._order else 0

    def min_score_value(self) -> Any:
        """The value with the lowest score, or ``None`` when empty."""
        return self._order[0][1] if self._order else None

    def max_score_value(self) -> Any:
        """The value with the highest score, or ``None`` when empty."""
        return self._order[-1][1] if self._order else None

    def first(self) -> Any:
        """The first value in order, or ``None`` when empty."""
        return self.min_score_value()

    def last(self) -> Any:
        """The last value in order, or ``None`` when empty."""
        return self.max_score_value()

    def __iter__(self) -> Iterator[tuple[Any, float]]:
        """Yield ``(value, score)`` pairs in ascending order."""
        return iter([(value, score) for score, value in self._order])

    def __reversed__(self) -> Iterator[tuple[Any, float]]:
        """Yield ``(value, score)`` pairs in descending order."""
        return iter([(value, score) for score, value in reversed(self._order)])


def set_intersection(left: Iterable[Any], right: Iterable[Any]) -> set[Any]:
    """Elements present in both."""
    return set(left) & set(right)


def set_union(left: Iterable[Any], right: Iterable[Any]) -> set[Any]:
    """Elements present in either."""
    return set(left) | set(right)


def set_difference(left: Iterable[Any], right: Iterable[Any]) -> set[Any]:
    """Elements of ``left`` absent from ``right``."""
    return set(left) - set(right)


def _merge(left: Sequence[Any], right: Sequence[Any]) -> Iterator[tuple[bool, bool, Any]]:
    """Walk two ascending sequences, pairing equal elements one to one.

    Yields ``(from_left, from_right, item)``.
    """
    left_items, right_items = iter(left), iter(right)
    a, b = next(left_items, _END), next(right_items, _END)
    while a is not _END and b is not _END:
        if a < b:
            yield True, False, a
            a = next(left_items, _END)
        elif b < a:
            yield False, True, b
            b = next(right_items, _END)
        else:
            yield True, True, a
            a, b = next(left_items, _END), next(right_items, _END)
    while a is not _END:
        yield True, False, a
        a = next(left_items, _END)
    while b is not _END:
        yield False, True, b
        b = next(right_items, _END)


def sorted_intersection(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Intersection of two ascending sequences, kept ascending."""
    return [item for in_left, in_right, item in _merge(left, right) if in_left and in_right]


def sorted_union(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Union of two ascending sequences, kept ascending."""
    return [item for _, _, item in _merge(left, right)]


def sorted_difference(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Elements of ascending ``left`` not matched in ascending ``right``."""
    return [item for in_left, in_right, item in _merge(left, right) if in_left and not in_right]