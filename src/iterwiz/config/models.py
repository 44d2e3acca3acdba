# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration models and validation for iterwiz.

Pydantic models validate the TOML payload; frozen dataclasses carry the
result at runtime so the formatting hot path never touches pydantic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from iterwiz.exceptions import IterwizValidationError

if TYPE_CHECKING:
    from pathlib import Path

CONFIG_VERSION: Final[int] = 0
DEFAULT_SEPARATOR: Final[str] = ", "
DEFAULT_NULL_TOKEN: Final[str] = "null"


class ConfigValidationError(IterwizValidationError):
    """Raised when configuration data contains invalid values."""


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        """Initialize the exception with version information.

        Args:
            provided: The config_version value provided in the configuration file.
            expected: The config_version value expected by this version of iterwiz.
        """
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the configuration file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when the root configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with configuration file path and validation error.

        Args:
            path: The path to the configuration file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid iterwiz configuration in {path}: {error}")


@dataclass(slots=True, frozen=True)
class StringifyConfig:
    """Runtime options for the stringify engine.

    Attributes:
        separator: Text placed between top-level elements, between the
            attributes of one element, and between nested sequence items.
        null_token: Text emitted for ``None`` attribute values and ``None``
            nested sequences.
        escape_strings: JSON-escape text values. Off by default, so embedded
            double quotes are emitted as-is.
        include_private: Include attributes whose names start with ``_``.
    """

    separator: str = DEFAULT_SEPARATOR
    null_token: str = DEFAULT_NULL_TOKEN
    escape_strings: bool = False
    include_private: bool = False


@dataclass(slots=True)
class IterwizConfig:
    config_version: int = CONFIG_VERSION
    stringify: StringifyConfig = field(default_factory=StringifyConfig)


class StringifyConfigModel(BaseModel):
    """Pydantic model validating the ``[stringify]`` table."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    separator: str = Field(default=DEFAULT_SEPARATOR)
    null_token: str = Field(default=DEFAULT_NULL_TOKEN)
    escape_strings: bool = False
    include_private: bool = False

    @field_validator("null_token")
    @classmethod
    def _require_null_token(cls, value: str) -> str:
        if not value:
            raise ValueError("null_token must not be empty")
        return value


class ConfigModel(BaseModel):
    """Pydantic model for validating the top-level iterwiz configuration from TOML.

    Attributes:
        config_version: Schema version number for the configuration file.
        stringify: Stringify engine options.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    config_version: int = Field(default=CONFIG_VERSION)
    stringify: StringifyConfigModel = Field(default_factory=StringifyConfigModel)

    @model_validator(mode="after")
    def _check_version(self) -> ConfigModel:
        if self.config_version != CONFIG_VERSION:
            raise UnsupportedConfigVersionError(self.config_version, CONFIG_VERSION)
        return self


def stringify_from_model(model: StringifyConfigModel) -> StringifyConfig:
    payload = model.model_dump(mode="python")
    return StringifyConfig(
        separator=payload["separator"],
        null_token=payload["null_token"],
        escape_strings=bool(payload["escape_strings"]),
        include_private=bool(payload["include_private"]),
    )


def model_to_dataclass(model: ConfigModel) -> IterwizConfig:
    return IterwizConfig(
        config_version=model.config_version,
        stringify=stringify_from_model(model.stringify),
    )


__all__ = [
    "CONFIG_VERSION",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "IterwizConfig",
    "StringifyConfig",
    "StringifyConfigModel",
    "UnsupportedConfigVersionError",
    "model_to_dataclass",
    "stringify_from_model",
]
