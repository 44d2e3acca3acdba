# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Public collections helpers (stable shim over internal implementations)."""

from __future__ import annotations

from iterwiz._internal.collection_utils import (
    Comparer,
    IndexedItem,
    Predicate,
    SplitResult,
    collect_non_nulls,
    dedupe_preserve,
    ensure_iterable,
    ensure_list,
    ensure_set,
    ensure_tuple,
    for_each_indexed,
    is_null_or_empty,
    join_strings,
    merge_preserve,
    sorted_with,
    split_by,
    where_if,
    with_index,
)

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
