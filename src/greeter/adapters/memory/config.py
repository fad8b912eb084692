"""In-memory configuration adapter for testing."""

from __future__ import annotations

from lib_layered_config import Config


def get_config_in_memory() -> Config:
    """Return an empty Config without reading any layer."""
    return Config({}, {})


__all__ = ["get_config_in_memory"]
