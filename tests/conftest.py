"""Shared pytest fixtures for the greeter suite.

Every CLI run is expected to print the same two lines, so the expected
output lives here once.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _load_dotenv() -> None:
    """Load a project-level .env when one exists."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")

EXPECTED_PROGRAM_OUTPUT = "Hello, Alice\nCounter check passed.\n"

#: The environment variable lib_layered_config maps onto ``lib_log_rich.console_level``.
CONSOLE_LEVEL_ENV = "GREETER___LIB_LOG_RICH__CONSOLE_LEVEL"


def _stop_logging_runtime() -> None:
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Fresh CliRunner; compare ``result.stdout`` since log records may reach stderr."""
    return CliRunner()


@pytest.fixture
def expected_output() -> str:
    return EXPECTED_PROGRAM_OUTPUT


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """``build_testing``: no files read, no logging runtime started."""
    from greeter.composition import build_testing

    return build_testing


@pytest.fixture
def production_factory(clear_config_cache: None, fresh_logging_runtime: None) -> Callable[[], AppServices]:
    """``build_production`` with an empty config cache and no running logging runtime."""
    from greeter.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Remove colour escapes so rich-formatted stderr can be matched as text."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def reset_traceback_config() -> Iterator[None]:
    """Run with lib_cli_exit_tools defaults and reset them again afterwards."""
    lib_cli_exit_tools.reset_config()
    try:
        yield
    finally:
        lib_cli_exit_tools.reset_config()


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Force ``get_config`` to re-read its layers, then drop what the test loaded."""
    from greeter.adapters.config import get_config

    get_config.cache_clear()
    try:
        yield
    finally:
        get_config.cache_clear()


@pytest.fixture
def fresh_logging_runtime() -> Iterator[None]:
    """Start and finish the test without a lib_log_rich runtime."""
    _stop_logging_runtime()
    try:
        yield
    finally:
        _stop_logging_runtime()


@pytest.fixture
def invalid_console_level(monkeypatch: pytest.MonkeyPatch) -> str:
    """Configure an unknown console level through the environment layer."""
    monkeypatch.setenv(CONSOLE_LEVEL_ENV, "NOPE")
    return "NOPE"


@pytest.fixture
def inject_logging_capture() -> Callable[[list[Config]], Callable[[], AppServices]]:
    """Return a factory builder whose ``init_logging`` records the Config it receives."""
    from greeter.composition import AppServices, build_testing

    def _inject(captured_configs: list[Config]) -> Callable[[], AppServices]:
        base = build_testing()
        services = AppServices(get_config=base.get_config, init_logging=captured_configs.append)
        return lambda: services

    return _inject
