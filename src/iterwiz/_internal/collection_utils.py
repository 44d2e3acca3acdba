# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Null-safe helpers over iterables.

Every helper treats ``None`` as an empty iterable instead of raising, so
callers can chain them over optional inputs without guarding first.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence, Sized
from functools import cmp_to_key
from typing import NamedTuple

from iterwiz._internal.exceptions import IterwizTypeError

type Comparer[T] = Callable[[T, T], int]
type Predicate[T] = Callable[[T], bool]

_MISSING = object()


class SplitResult[T](NamedTuple):
    """Items partitioned by a predicate, both halves in source order."""

    desired: list[T]
    remaining: list[T]


class IndexedItem[T](NamedTuple):
    index: int
    item: T


def _require_callable(value: object, role: str) -> None:
    if not callable(value):
        message = f"{role} must be callable, got {type(value).__name__}"
        raise IterwizTypeError(message)


def ensure_list[T](values: Iterable[T] | None) -> list[T]:
    """Return ``values`` as a list, reusing it when it already is one.

    Args:
        values: Source iterable, or ``None``.

    Returns:
        The same object when ``values`` is a ``list``, a new list otherwise.
        ``None`` yields an empty list.
    """
    if values is None:
        return []
    if isinstance(values, list):
        return values
    return list(values)


def ensure_iterable[T](values: Iterable[T] | None) -> Iterable[T]:
    """Return ``values`` unchanged, or an empty tuple for ``None``."""
    if values is None:
        return ()
    return values


def ensure_tuple[T](values: Iterable[T] | None) -> tuple[T, ...]:
    """Return ``values`` as a tuple, reusing it when it already is one."""
    if values is None:
        return ()
    if isinstance(values, tuple):
        return values
    return tuple(values)


def ensure_set[T: Hashable](values: Iterable[T] | None) -> set[T]:
    """Return ``values`` as a set, reusing it when it already is one.

    Duplicates collapse; ordering is not preserved. Use ``dedupe_preserve``
    when first-seen order matters.
    """
    if values is None:
        return set()
    if isinstance(values, set):
        return values
    return set(values)


def collect_non_nulls[T](values: Iterable[T | None] | None) -> Iterator[T]:
    """Lazily yield the items of ``values`` that are not ``None``.

    Falsy items such as ``0`` or ``""`` are kept.
    """
    if values is None:
        return
    for value in values:
        if value is not None:
            yield value


def split_by[T](values: Iterable[T] | None, predicate: Predicate[T]) -> SplitResult[T]:
    """Partition ``values`` into items that match ``predicate`` and the rest.

    Args:
        values: Source iterable, or ``None``.
        predicate: Callable deciding which half an item belongs to.

    Returns:
        ``SplitResult(desired, remaining)``. Each list preserves source order.

    Raises:
        IterwizTypeError: If ``predicate`` is not callable.
    """
    _require_callable(predicate, "predicate")
    desired: list[T] = []
    remaining: list[T] = []
    for value in ensure_iterable(values):
        (desired if predicate(value) else remaining).append(value)
    return SplitResult(desired, remaining)


def is_null_or_empty(values: Iterable[object] | None) -> bool:
    """Return ``True`` when ``values`` is ``None`` or holds no items.

    Sized inputs are checked with ``len``. For other iterables the first item
    is pulled, so a one-shot iterator loses that item.
    """
    if values is None:
        return True
    if isinstance(values, Sized):
        return len(values) == 0
    return next(iter(values), _MISSING) is _MISSING


def where_if[T](values: Iterable[T] | None, condition: bool, predicate: Predicate[T]) -> Iterable[T]:
    """Filter ``values`` with ``predicate`` only when ``condition`` holds.

    When ``condition`` is false the input is returned as-is (``None`` becomes
    an empty tuple) and ``predicate`` is never called.
    """
    source = ensure_iterable(values)
    if not condition:
        return source
    _require_callable(predicate, "predicate")
    return (value for value in source if predicate(value))


def with_index[T](values: Iterable[T] | None, start: int = 0) -> Iterator[IndexedItem[T]]:
    """Lazily pair each item with its position."""
    for index, value in enumerate(ensure_iterable(values), start):
        yield IndexedItem(index, value)


def for_each_indexed[T](values: Iterable[T] | None, action: Callable[[T, int], object]) -> None:
    """Call ``action(item, index)`` for every item, in order."""
    _require_callable(action, "action")
    for index, value in enumerate(ensure_iterable(values)):
        action(value, index)


def join_strings(values: Iterable[object] | None, separator: str = ", ") -> str:
    """Join the text form of each non-``None`` item with ``separator``."""
    return separator.join(str(value) for value in collect_non_nulls(values))


def sorted_with[T](
    values: Iterable[T] | None,
    comparer: Comparer[T],
    *,
    descending: bool = False,
) -> list[T]:
    """Return a new list ordered by a three-way ``comparer``.

    Args:
        values: Source iterable, or ``None``.
        comparer: ``(a, b) -> int``; negative when ``a`` sorts first, zero
            when equal, positive when ``b`` sorts first.
        descending: Reverse the comparer's order. Equal items keep their
            source order either way.

    Returns:
        A sorted list; the input is never mutated.

    Raises:
        IterwizTypeError: If ``comparer`` is not callable.
    """
    _require_callable(comparer, "comparer")
    return sorted(ensure_iterable(values), key=cmp_to_key(comparer), reverse=descending)


def dedupe_preserve[T: Hashable](values: Iterable[T] | None) -> list[T]:
    """Return items in order, dropping subsequent duplicates.

    Args:
        values: Iterable of hashable items whose first occurrence should be
            preserved.

    Returns:
        A list containing the first appearance of each unique value, ordered by
        the original traversal.
    """
    seen: set[T] = set()
    result: list[T] = []
    for value in ensure_iterable(values):
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


def merge_preserve[T: Hashable](base: Iterable[T] | None, addition: Sequence[T] | None) -> list[T]:
    """Combine iterables while preserving the first occurrence order.

    Args:
        base: Initial iterable that establishes the output order.
        addition: Additional values that should be appended only if they have
            not already appeared in ``base``.

    Returns:
        A list starting with ``base`` followed by unseen elements from
        ``addition``.
    """
    result = list(ensure_iterable(base))
    seen = set(result)
    for value in ensure_iterable(addition):
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


__all__ = [
    "Comparer",
    "IndexedItem",
    "Predicate",
    "SplitResult",
    "collect_non_nulls",
    "dedupe_preserve",
    "ensure_iterable",
    "ensure_list",
    "ensure_set",
    "ensure_tuple",
    "for_each_indexed",
    "is_null_or_empty",
    "join_strings",
    "merge_preserve",
    "sorted_with",
    "split_by",
    "where_if",
    "with_index",
]
