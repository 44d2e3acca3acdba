# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""iterwiz - null-safe helpers for iterables.

Provides conversion, filtering, partitioning, indexing, joining and
comparer-based ordering helpers that treat ``None`` as an empty iterable, plus
``stringify``, a deterministic JSON-like debug renderer for sequences of
records.
"""

from __future__ import annotations

from iterwiz._internal.exceptions import (
    InputDecodeError,
    IterwizError,
    IterwizTypeError,
    IterwizValidationError,
)

from .collections import (
    IndexedItem,
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
from .config import IterwizConfig, StringifyConfig, load_config
from .core.records import (
    RecordField,
    RecordRegistrationError,
    is_record,
    record_fields,
    register_record,
    unregister_record,
)
from .error_codes import error_code_for
from .formatting import format_element, format_sequence, stringify
from .logging_utils import configure_logging

__all__ = [
    "__version__",
    "IndexedItem",
    "InputDecodeError",
    "IterwizConfig",
    "IterwizError",
    "IterwizTypeError",
    "IterwizValidationError",
    "RecordField",
    "RecordRegistrationError",
    "SplitResult",
    "StringifyConfig",
    "collect_non_nulls",
    "configure_logging",
    "dedupe_preserve",
    "ensure_iterable",
    "ensure_list",
    "ensure_set",
    "ensure_tuple",
    "error_code_for",
    "for_each_indexed",
    "format_element",
    "format_sequence",
    "is_null_or_empty",
    "is_record",
    "join_strings",
    "load_config",
    "merge_preserve",
    "record_fields",
    "register_record",
    "sorted_with",
    "split_by",
    "stringify",
    "unregister_record",
    "where_if",
    "with_index",
]

__version__ = "0.1.0"
