# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Public exception types re-exported from the internal package."""

from __future__ import annotations

from iterwiz._internal.exceptions import (
    InputDecodeError,
    IterwizError,
    IterwizTypeError,
    IterwizValidationError,
)

__all__ = ["InputDecodeError", "IterwizError", "IterwizTypeError", "IterwizValidationError"]
