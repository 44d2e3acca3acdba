# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common exception hierarchy for iterwiz."""

from __future__ import annotations

__all__ = ["InputDecodeError", "IterwizError", "IterwizTypeError", "IterwizValidationError"]


class IterwizError(Exception):
    """Base error for all iterwiz exceptions."""


class IterwizValidationError(IterwizError, ValueError):
    """Raised when input data fails validation checks."""


class IterwizTypeError(IterwizError, TypeError):
    """Raised when input data has an unexpected type."""


class InputDecodeError(IterwizValidationError):
    """Raised when CLI input cannot be read or is not a JSON array."""

    def __init__(self, source: str, error: Exception) -> None:
        """Initialize the exception with the input source and decode failure.

        Args:
            source: Path of the input, or ``<stdin>``.
            error: The underlying read or decode exception.
        """
        self.source = source
        self.error = error
        super().__init__(f"Unable to decode {source}: {error}")
