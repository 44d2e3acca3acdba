# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from collections.abc import Mapping
from typing import NewType

from iterwiz._internal.exceptions import (
    InputDecodeError,
    IterwizError,
    IterwizTypeError,
    IterwizValidationError,
)
from iterwiz.config.models import (
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
)
from iterwiz.core.records import RecordRegistrationError

ErrorCode = NewType("ErrorCode", str)


_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    IterwizError: ErrorCode("IW000"),
    IterwizValidationError: ErrorCode("IW100"),
    IterwizTypeError: ErrorCode("IW101"),
    ConfigValidationError: ErrorCode("IW110"),
    UnsupportedConfigVersionError: ErrorCode("IW111"),
    ConfigReadError: ErrorCode("IW112"),
    InvalidConfigFileError: ErrorCode("IW113"),
    RecordRegistrationError: ErrorCode("IW200"),
    InputDecodeError: ErrorCode("IW300"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured iterwiz exception."""

    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("IW000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes.

    Intended for diagnostics, tests, and documentation generation - avoids
    exposing the private mapping while keeping a single source of truth.
    """

    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
