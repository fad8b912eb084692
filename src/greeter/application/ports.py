"""Callable Protocols the CLI depends on, satisfied by production and in-memory adapters.

``Config`` is imported for type checking only, keeping this layer free of
infrastructure imports at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Return the merged configuration."""

    def __call__(self) -> Config: ...


class InitLogging(Protocol):
    """Start logging from the ``[lib_log_rich]`` section of a Config."""

    def __call__(self, config: Config) -> None: ...


__all__ = ["GetConfig", "InitLogging"]
