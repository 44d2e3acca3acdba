# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Canonical JSON types and helpers used across iterwiz.

This module defines the JSON value shapes and generic helpers for working
with JSON-compatible data. It intentionally has no dependencies on
logging, configuration, or CLI layers to keep the dependency graph
simple and acyclic.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import cast

__all__ = [
    "JSONList",
    "JSONMapping",
    "JSONValue",
    "normalise_enums_for_json",
    "require_json_list",
]

type JSONValue = str | int | float | bool | dict[str, JSONValue] | list[JSONValue] | None
type JSONMapping = dict[str, JSONValue]
type JSONList = list[JSONValue]


def require_json_list(payload: str) -> JSONList:
    """Parse a JSON document that must hold a top-level array.

    Args:
        payload: Raw JSON text to parse.

    Returns:
        The decoded array.

    Raises:
        ValueError: If ``payload`` is empty, malformed, or not an array.
    """
    data_str = payload.strip()
    if not data_str:
        message = "Expected a JSON array but received empty input"
        raise ValueError(message)
    decoded: object = json.loads(data_str)
    if not isinstance(decoded, list):
        message = f"Expected a JSON array but received {type(decoded).__name__}"
        raise ValueError(message)  # noqa: TRY004  # JUSTIFIED: callers treat every decode failure as ValueError
    return cast("JSONList", decoded)


def normalise_enums_for_json(value: object) -> JSONValue:
    """Recursively convert Enum keys/values to their string payloads for JSON serialisation.

    Args:
        value: Arbitrary Python object hierarchy that may include ``Enum``
            instances, mappings, or sequences.

    Returns:
        A JSON-compatible structure (built from ``dict``/``list``/primitives)
        with all enum keys and values replaced by their ``.value`` payloads.
    """

    def _convert(obj: object) -> JSONValue:
        if isinstance(obj, Enum):
            return cast("JSONValue", obj.value)
        if isinstance(obj, dict):
            mapping_obj = cast("dict[object, object]", obj)
            result: dict[str, JSONValue] = {}
            for key, raw_val in mapping_obj.items():
                if isinstance(key, Enum):
                    norm_key: str = str(key.value)
                elif isinstance(key, str):
                    norm_key = key
                else:
                    norm_key = str(key)
                result[norm_key] = _convert(raw_val)
            return cast("JSONValue", result)
        if isinstance(obj, list | tuple):
            sequence_obj = cast("list[object] | tuple[object, ...]", obj)
            return cast("JSONValue", [_convert(item) for item in sequence_obj])
        if isinstance(obj, str | int | float | bool) or obj is None:
            return cast("JSONValue", obj)
        return cast("JSONValue", str(obj))

    return _convert(value)
