# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core type definitions and record introspection for iterwiz.

- Model types: Enums for log formats and log components
- Records: ordered attribute discovery for record-like values

``records`` is not imported eagerly because it depends on the logging layer,
which in turn imports ``model_types`` from this package.
"""

from __future__ import annotations

from . import model_types

__all__ = ["model_types"]
