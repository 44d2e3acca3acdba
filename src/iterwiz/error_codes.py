# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Public error code helpers re-exported from the internal package."""

from __future__ import annotations

from iterwiz._internal.error_codes import ErrorCode, error_code_catalog, error_code_for

__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
