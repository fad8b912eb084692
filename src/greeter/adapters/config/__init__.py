"""Configuration adapter - layered loading through lib_layered_config."""

from __future__ import annotations

from .loader import DEFAULT_CONFIG_FILE, get_config

__all__ = ["DEFAULT_CONFIG_FILE", "get_config"]
