# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration loading for iterwiz.

Configuration lives in ``iterwiz.toml`` or ``.iterwiz.toml``; the same keys may
instead be nested under ``[tool.iterwiz]`` so a ``pyproject.toml`` can be passed
explicitly.
"""

from __future__ import annotations

import logging
import tomllib as toml
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from iterwiz._internal.logging_utils import structured_extra
from iterwiz.core.model_types import LogComponent

from .models import (
    CONFIG_VERSION,
    ConfigModel,
    ConfigReadError,
    InvalidConfigFileError,
    IterwizConfig,
    UnsupportedConfigVersionError,
    model_to_dataclass,
)

logger: logging.Logger = logging.getLogger("iterwiz.config")

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("iterwiz.toml", ".iterwiz.toml")


def _read_toml(path: Path) -> dict[str, object]:
    try:
        return toml.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, toml.TOMLDecodeError) as exc:
        raise ConfigReadError(path, exc) from exc


def _tool_section(raw_map: dict[str, object]) -> dict[str, object]:
    tool_obj = raw_map.get("tool")
    if isinstance(tool_obj, dict):
        tool_section_any = cast("dict[str, object]", tool_obj).get("iterwiz")
        if isinstance(tool_section_any, dict):
            return cast("dict[str, object]", tool_section_any)
    return raw_map


def _check_version(raw_map: dict[str, object]) -> None:
    version = raw_map.get("config_version", CONFIG_VERSION)
    if isinstance(version, int) and not isinstance(version, bool) and version != CONFIG_VERSION:
        raise UnsupportedConfigVersionError(version, CONFIG_VERSION)


def parse_config(raw_map: dict[str, object], *, source: Path) -> IterwizConfig:
    """Validate a decoded TOML mapping.

    Args:
        raw_map: Decoded TOML document, either flat or with a ``[tool.iterwiz]``
            table.
        source: File the mapping came from, used in error messages.

    Returns:
        The runtime configuration.

    Raises:
        UnsupportedConfigVersionError: If ``config_version`` is not supported.
        InvalidConfigFileError: If any other key fails validation.
    """
    section = _tool_section(raw_map)
    _check_version(section)
    try:
        cfg_model = ConfigModel.model_validate(section)
    except ValidationError as exc:
        raise InvalidConfigFileError(source, exc) from exc
    return model_to_dataclass(cfg_model)


def load_config(explicit_path: Path | None = None) -> IterwizConfig:
    """Load iterwiz configuration from a TOML file or use defaults.

    The function searches for configuration files in the following order:
    1. If explicit_path is provided, only that path is checked
    2. Otherwise, it checks for iterwiz.toml and .iterwiz.toml in the current directory

    Args:
        explicit_path: Optional explicit path to a configuration file.

    Returns:
        An ``IterwizConfig``; defaults when no file is found.

    Raises:
        ConfigReadError: If a candidate file exists but cannot be read or parsed.
        InvalidConfigFileError: If the file contains invalid configuration data.
        UnsupportedConfigVersionError: If the file declares another schema version.
    """
    search_order: list[Path] = []
    if explicit_path:
        search_order.append(explicit_path)
    else:
        search_order.extend(Path(name) for name in CONFIG_FILENAMES)

    for candidate in search_order:
        if not candidate.exists():
            continue
        cfg = parse_config(_read_toml(candidate), source=candidate)
        logger.debug(
            "Loaded configuration from %s",
            candidate,
            extra=structured_extra(component=LogComponent.CONFIG, path=candidate),
        )
        return cfg

    logger.debug(
        "No configuration file found; using defaults",
        extra=structured_extra(component=LogComponent.CONFIG),
    )
    return IterwizConfig()


__all__ = ["CONFIG_FILENAMES", "load_config", "parse_config"]
