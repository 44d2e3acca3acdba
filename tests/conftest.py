# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

_LOG_ENV_VARS = ("ITERWIZ_LOG_FORMAT", "ITERWIZ_LOG_LEVEL")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")


@pytest.fixture(autouse=True)
def reset_iterwiz_logging() -> Generator[None, None, None]:
    """Restore the ``iterwiz`` logger tree after tests that configure logging."""
    logger = logging.getLogger("iterwiz")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    env = {name: os.environ.get(name) for name in _LOG_ENV_VARS}
    yield
    logger.handlers.clear()
    logger.handlers.extend(handlers)
    logger.setLevel(level)
    logger.propagate = propagate
    for child in ("iterwiz.cli", "iterwiz.config", "iterwiz.formatting", "iterwiz.records"):
        logging.getLogger(child).setLevel(logging.NOTSET)
    for name, value in env.items():
        if value is None:
            _ = os.environ.pop(name, None)
        else:
            os.environ[name] = value
