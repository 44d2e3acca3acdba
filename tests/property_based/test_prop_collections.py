# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Property-based tests for the iterable helpers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterwiz.collections import (
    collect_non_nulls,
    dedupe_preserve,
    join_strings,
    sorted_with,
    split_by,
    with_index,
)

pytestmark = pytest.mark.property


@given(st.lists(st.none() | st.integers()))
def test_collect_non_nulls_preserves_order(values: list[int | None]) -> None:
    assert list(collect_non_nulls(values)) == [value for value in values if value is not None]


@given(st.lists(st.integers()))
def test_split_by_halves_recombine_to_input(values: list[int]) -> None:
    desired, remaining = split_by(values, lambda value: value % 2 == 0)
    assert all(value % 2 == 0 for value in desired)
    assert all(value % 2 != 0 for value in remaining)
    assert sorted(desired + remaining) == sorted(values)
    assert len(desired) + len(remaining) == len(values)


@given(st.lists(st.integers()))
def test_sorted_with_matches_builtin_sort(values: list[int]) -> None:
    assert sorted_with(values, lambda left, right: (left > right) - (left < right)) == sorted(values)


@given(st.lists(st.integers()))
def test_dedupe_preserve_keeps_first_occurrences(values: list[int]) -> None:
    result = dedupe_preserve(values)
    assert len(result) == len(set(values))
    assert result == sorted(set(values), key=values.index)


@given(st.lists(st.text(alphabet="abc", max_size=3)))
def test_with_index_positions_are_contiguous(values: list[str]) -> None:
    assert [item.index for item in with_index(values)] == list(range(len(values)))


@given(st.lists(st.none() | st.integers()))
def test_join_strings_matches_filtered_join(values: list[int | None]) -> None:
    assert join_strings(values) == ", ".join(str(value) for value in values if value is not None)
