# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Attribute introspection for record-like values.

The stringify engine never touches ``__dict__`` or annotations directly; it asks
this module for the ordered ``(name, value)`` pairs of a value. A value is a
*record* when one of the following applies, checked in order:

1. its type (or a base) was registered through ``register_record``;
2. it is a dataclass instance;
3. it is a pydantic model instance;
4. it is a ``NamedTuple`` instance;
5. it is a ``Mapping``;
6. it is a plain object with instance attributes (``__dict__`` or ``__slots__``).

Text, bytes, numbers, dates, enums, paths, UUIDs, callables and other iterables
are never records. Neither is a plain object whose attributes are all
``_``-prefixed while its type defines its own ``__str__`` or ``__repr__``
(``ipaddress`` values, exceptions); those render through their text form.

Mapping keys are data, so they are never filtered as private names.
"""

from __future__ import annotations

import dataclasses
import logging
import numbers
from collections.abc import Iterable, Mapping, Sequence
from datetime import date, time, timedelta
from enum import Enum
from pathlib import PurePath
from typing import Final, NamedTuple, cast
from uuid import UUID

from pydantic import BaseModel

from iterwiz._internal.exceptions import IterwizValidationError
from iterwiz._internal.logging_utils import structured_extra
from iterwiz.core.model_types import LogComponent

logger: logging.Logger = logging.getLogger("iterwiz.records")

_SCALAR_TYPES: Final[tuple[type, ...]] = (
    str,
    bytes,
    bytearray,
    memoryview,
    numbers.Number,
    date,
    time,
    timedelta,
    Enum,
    PurePath,
    UUID,
    type,
)
_SLOT_EXCLUDES: Final[frozenset[str]] = frozenset({"__dict__", "__weakref__"})

_registry: dict[type, tuple[str, ...]] = {}


class RecordField(NamedTuple):
    name: str
    value: object


class RecordRegistrationError(IterwizValidationError):
    """Raised when an explicit record registration is malformed."""

    def __init__(self, target: object, reason: str) -> None:
        """Initialize the exception with the offending target and reason.

        Args:
            target: The value passed as the record type.
            reason: Human readable description of the problem.
        """
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot register {target!r} as a record: {reason}")


def register_record(cls: type, fields: Sequence[str]) -> None:
    """Declare the ordered attributes to read from instances of ``cls``.

    Registrations take precedence over every other introspection strategy and
    apply to subclasses too. Registering the same type again replaces the
    previous field list.

    Args:
        cls: Type whose instances should be treated as records.
        fields: Attribute names, in output order.

    Raises:
        RecordRegistrationError: If ``cls`` is not a type, ``fields`` is a
            bare string or empty, or a field name is not an identifier.
    """
    if not isinstance(cls, type):
        raise RecordRegistrationError(cls, "expected a class")
    if isinstance(fields, str):
        raise RecordRegistrationError(cls, "fields must be a sequence of names, not a string")
    names = tuple(fields)
    if not names:
        raise RecordRegistrationError(cls, "at least one field is required")
    for name in names:
        if not isinstance(name, str) or not name.isidentifier():
            raise RecordRegistrationError(cls, f"invalid field name {name!r}")
    _registry[cls] = names
    logger.debug(
        "Registered record type %s",
        cls.__qualname__,
        extra=structured_extra(component=LogComponent.RECORDS, count=len(names)),
    )


def unregister_record(cls: type) -> None:
    """Drop an explicit registration; unknown types are ignored."""
    _ = _registry.pop(cls, None)


def _registered_fields(cls: type) -> tuple[str, ...] | None:
    for base in cls.__mro__:
        names = _registry.get(base)
        if names is not None:
            return names
    return None


def _is_namedtuple(value: object) -> bool:
    return isinstance(value, tuple) and isinstance(getattr(type(value), "_fields", None), tuple)


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for base in reversed(cls.__mro__):
        raw = base.__dict__.get("__slots__", ())
        slots: Iterable[str] = (raw,) if isinstance(raw, str) else cast("Iterable[str]", raw)
        names.extend(name for name in slots if name not in _SLOT_EXCLUDES and name not in names)
    return names


def _instance_names(value: object) -> list[str]:
    names = _slot_names(type(value))
    if hasattr(value, "__dict__"):
        names.extend(name for name in vars(value) if name not in names)
    return names


def _has_own_text(cls: type) -> bool:
    return cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__


def is_record(value: object) -> bool:
    """Return ``True`` when ``value`` exposes introspectable named attributes."""
    if value is None:
        return False
    cls = type(value)
    if _registered_fields(cls) is not None:
        return True
    if isinstance(value, BaseModel | Mapping) or _is_namedtuple(value):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    if isinstance(value, _SCALAR_TYPES) or isinstance(value, Iterable) or callable(value):
        return False
    if not hasattr(value, "__dict__") and not _slot_names(cls):
        return False
    if any(not name.startswith("_") for name in _instance_names(value)):
        return True
    return not _has_own_text(cls)


def _read(value: object, name: str) -> object:
    try:
        return getattr(value, name)
    except AttributeError:
        logger.debug(
            "Attribute %s of %s is unset; rendering as null",
            name,
            type(value).__qualname__,
            extra=structured_extra(component=LogComponent.RECORDS),
        )
    except Exception as exc:  # noqa: BLE001  # JUSTIFIED: rendering never fails on a faulty accessor
        logger.debug(
            "Reading %s of %s raised %s; rendering as null",
            name,
            type(value).__qualname__,
            type(exc).__name__,
            extra=structured_extra(component=LogComponent.RECORDS),
        )
    return None


def _public(names: Iterable[str], include_private: bool) -> list[str]:
    return [name for name in names if include_private or not name.startswith("_")]


def _attribute_names(value: object, include_private: bool) -> list[str]:
    cls = type(value)
    registered = _registered_fields(cls)
    if registered is not None:
        return list(registered)
    if isinstance(value, BaseModel):
        return _public(type(value).model_fields, include_private)
    if dataclasses.is_dataclass(value):
        return _public((field.name for field in dataclasses.fields(value)), include_private)
    if _is_namedtuple(value):
        return _public(cast("tuple[str, ...]", cls._fields), include_private)  # pyright: ignore[reportAttributeAccessIssue]
    return _public(_instance_names(value), include_private)


def record_fields(value: object, *, include_private: bool = False) -> list[RecordField] | None:
    """Return the ordered attributes of a record-like ``value``.

    Args:
        value: Any object.
        include_private: Keep attributes whose names start with ``_``.
            Registered field lists and mapping keys are always returned in
            full.

    Returns:
        ``RecordField`` pairs in declaration order (key order for mappings),
        or ``None`` when ``value`` is not a record.
    """
    if not is_record(value):
        return None
    if isinstance(value, Mapping) and _registered_fields(type(value)) is None:
        mapping = cast("Mapping[object, object]", value)
        return [RecordField(str(key), item) for key, item in mapping.items()]
    return [RecordField(name, _read(value, name)) for name in _attribute_names(value, include_private)]


__all__ = [
    "RecordField",
    "RecordRegistrationError",
    "is_record",
    "record_fields",
    "register_record",
    "unregister_record",
]
