"""lib_log_rich initialization shared by every entry point.

Contents:
    * :class:`LoggingConfigModel` - validates the ``[lib_log_rich]`` section.
    * :func:`init_logging` - starts the runtime once per process.

Logging settings never decide whether the greeting prints: a section that
fails validation, or that lib_log_rich refuses, is replaced by the bundled
defaults and reported on stderr.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import Literal

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, field_validator

from greeter import __init__conf__

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfigModel(BaseModel):
    """Typed view of ``[lib_log_rich]``; unknown keys are forwarded to ``RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(console_level="debug").console_level
        'DEBUG'
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"
    console_level: LogLevelName = "WARNING"

    model_config = ConfigDict(extra="allow")

    @field_validator("console_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def _runtime_config(settings: LoggingConfigModel) -> lib_log_rich.runtime.RuntimeConfig:
    """Build a RuntimeConfig, naming the service after the package when unset."""
    passthrough = settings.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=settings.service or __init__conf__.name,
        environment=settings.environment,
        **passthrough,
    )


def _fallback_warning(exc: ValueError) -> str:
    first_line = str(exc).splitlines()[0] if str(exc) else type(exc).__name__
    return f"[{__init__conf__.shell_command}] warning: ignoring invalid [lib_log_rich] settings ({first_line}); using defaults"


def init_logging(config: Config) -> None:
    """Start lib_log_rich from ``config`` and bridge stdlib ``logging`` into it.

    Enables ``.env`` discovery for ``LOG_*`` variables first. Does nothing
    when the runtime is already running.

    Args:
        config: Loaded layered configuration.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()

    section: object = config.get("lib_log_rich", default={})
    data = dict(section) if isinstance(section, Mapping) else section
    try:
        settings = LoggingConfigModel.model_validate(data)
        lib_log_rich.runtime.init(_runtime_config(settings))
    except ValueError as exc:  # pydantic.ValidationError is a ValueError
        print(_fallback_warning(exc), file=sys.stderr)
        lib_log_rich.runtime.init(_runtime_config(LoggingConfigModel()))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingConfigModel", "init_logging"]
