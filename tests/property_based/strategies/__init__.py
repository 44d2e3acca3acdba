# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common Hypothesis strategies."""

from __future__ import annotations

from .common import nullable_people, people, person_records

__all__ = [
    "nullable_people",
    "people",
    "person_records",
]
