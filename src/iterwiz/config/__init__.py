# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration loading and models for iterwiz."""

from __future__ import annotations

from .loader import CONFIG_FILENAMES, load_config, parse_config
from .models import (
    CONFIG_VERSION,
    ConfigModel,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    IterwizConfig,
    StringifyConfig,
    StringifyConfigModel,
    UnsupportedConfigVersionError,
)

__all__ = [
    "CONFIG_FILENAMES",
    "CONFIG_VERSION",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "IterwizConfig",
    "StringifyConfig",
    "StringifyConfigModel",
    "UnsupportedConfigVersionError",
    "load_config",
    "parse_config",
]
