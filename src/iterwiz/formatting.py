# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Deterministic JSON-like debug rendering of record sequences.

``stringify`` turns a sequence of records into brace-delimited attribute maps::

    stringify([Person(name="Ada", age=36, tags=[])])
    # { "name": "Ada", "age": 36, "tags": [] }

Rendering rules for an attribute value:

- ``None`` renders as ``null``;
- ``str`` renders double-quoted, without escaping unless
  ``StringifyConfig.escape_strings`` is set;
- records (see ``iterwiz.core.records``) render recursively as ``{ ... }``;
- other iterables render as ``[ ... ]`` with each item rendered by these rules;
- everything else renders unquoted via ``str()``.

``None`` elements of the top-level sequence are dropped without leaving a
separator behind. Inside a record, ``None`` is always rendered as ``null``.

The input graph must be acyclic. There is no cycle detection: a record that
contains itself recurses until Python raises ``RecursionError``.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Iterable
from typing import Final

from iterwiz._internal.collection_utils import collect_non_nulls, join_strings
from iterwiz._internal.logging_utils import structured_extra
from iterwiz.config.models import StringifyConfig
from iterwiz.core.model_types import LogComponent
from iterwiz.core.records import RecordField, record_fields

logger: logging.Logger = logging.getLogger("iterwiz.formatting")

OPEN_RECORD: Final[str] = "{ "
CLOSE_RECORD: Final[str] = " }"
OPEN_SEQUENCE: Final[str] = "["
CLOSE_SEQUENCE: Final[str] = "]"

_DEFAULT_CONFIG: Final[StringifyConfig] = StringifyConfig()
_TEXT_LIKE: Final[tuple[type, ...]] = (str, bytes, bytearray, memoryview)


def _quote(text: str, config: StringifyConfig) -> str:
    if config.escape_strings:
        return json.dumps(text, ensure_ascii=False)
    return f'"{text}"'


def _write_fields(fields: list[RecordField], out: list[str], config: StringifyConfig) -> None:
    out.append(OPEN_RECORD)
    for position, (name, value) in enumerate(fields):
        if position:
            out.append(config.separator)
        out.append(_quote(name, config))
        out.append(": ")
        _write_value(value, out, config)
    out.append(CLOSE_RECORD)


def _write_items(items: Iterable[object], out: list[str], config: StringifyConfig) -> None:
    out.append(OPEN_SEQUENCE)
    for position, item in enumerate(items):
        if position:
            out.append(config.separator)
        _write_value(item, out, config)
    out.append(CLOSE_SEQUENCE)


def _write_value(value: object, out: list[str], config: StringifyConfig) -> None:
    if value is None:
        out.append(config.null_token)
        return
    if isinstance(value, str):
        out.append(_quote(value, config))
        return
    fields = record_fields(value, include_private=config.include_private)
    if fields is not None:
        _write_fields(fields, out, config)
    elif isinstance(value, Iterable) and not isinstance(value, _TEXT_LIKE):
        _write_items(value, out, config)
    else:
        out.append(str(value))


def format_element(obj: object, *, config: StringifyConfig | None = None) -> str:
    """Render one element.

    Records render as ``{ "name": value, ... }``; a record without readable
    attributes renders as ``{  }``. Values that are not records fall back to
    the attribute rendering rules (quoted text, ``str()`` for scalars).

    Args:
        obj: The element to render.
        config: Rendering options; defaults to ``StringifyConfig()``.

    Returns:
        The rendered text.
    """
    out: list[str] = []
    _write_value(obj, out, config or _DEFAULT_CONFIG)
    return "".join(out)


def format_sequence(items: Iterable[object] | None, *, config: StringifyConfig | None = None) -> str:
    """Render a nested sequence as ``[item, ...]``; ``None`` renders as ``null``."""
    selected = config or _DEFAULT_CONFIG
    if items is None:
        return selected.null_token
    out: list[str] = []
    _write_items(items, out, selected)
    return "".join(out)


def stringify(sequence: Iterable[object] | None, *, config: StringifyConfig | None = None) -> str:
    """Render every non-``None`` element of ``sequence``, separated by ``", "``.

    Args:
        sequence: Elements to render, or ``None``. Read once, front to back.
        config: Rendering options; defaults to ``StringifyConfig()``.

    Returns:
        The rendered text; ``""`` for ``None``, empty, or all-``None`` input.
    """
    if sequence is None:
        return ""
    selected = config or _DEFAULT_CONFIG
    started = time.perf_counter()
    rendered = [format_element(element, config=selected) for element in collect_non_nulls(sequence)]
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Stringified %d element(s)",
            len(rendered),
            extra=structured_extra(
                component=LogComponent.FORMATTING,
                count=len(rendered),
                duration_ms=(time.perf_counter() - started) * 1000,
            ),
        )
    return join_strings(rendered, selected.separator)


__all__ = ["format_element", "format_sequence", "stringify"]
