"""Composition root: pick production or in-memory adapters for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..application.ports import GetConfig, InitLogging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Adapters handed to the root command through ``ctx.obj``."""

    get_config: GetConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Layered configuration from disk and environment, lib_log_rich logging."""
    from ..adapters.config.loader import get_config
    from ..adapters.logging.setup import init_logging

    return AppServices(get_config=get_config, init_logging=init_logging)


def build_testing() -> AppServices:
    """Empty configuration and no logging runtime."""
    from ..adapters.memory import get_config_in_memory, init_logging_in_memory

    return AppServices(get_config=get_config_in_memory, init_logging=init_logging_in_memory)


__all__ = ["AppServices", "build_production", "build_testing"]
