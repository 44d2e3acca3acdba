# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

from tests.fixtures.records import Person

__all__ = [
    "nullable_people",
    "people",
    "person_records",
]

# Quotes and braces are excluded so separators can be located in rendered output.
_SAFE_TEXT = st.text(
    alphabet=st.characters(exclude_characters='"{}[],', exclude_categories=("Cs",)),
    max_size=12,
)


def person_records(max_children: int = 3) -> st.SearchStrategy[Person]:
    """Return a strategy for shallow ``Person`` records.

    Args:
        max_children: Maximum number of children attached to a generated record.

    Returns:
        Hypothesis strategy producing ``Person`` values with at most one level
        of nesting.
    """
    leaf = st.builds(Person, Name=st.none() | _SAFE_TEXT, Age=st.integers(min_value=0, max_value=150))
    return st.builds(
        Person,
        Name=st.none() | _SAFE_TEXT,
        Age=st.integers(min_value=0, max_value=150),
        Classes=st.none() | st.lists(leaf, max_size=max_children),
    )


def people(max_size: int = 5) -> st.SearchStrategy[list[Person]]:
    """Lists of records without ``None`` entries."""
    return st.lists(person_records(), max_size=max_size)


def nullable_people(max_size: int = 8) -> st.SearchStrategy[list[Person | None]]:
    """Lists of records with ``None`` entries mixed in."""
    return st.lists(st.none() | person_records(), max_size=max_size)
