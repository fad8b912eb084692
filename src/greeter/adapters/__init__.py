"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Layered configuration loading for the logging section
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - rich-click command-line interface
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
