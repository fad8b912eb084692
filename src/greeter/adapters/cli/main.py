"""Process entry: run the root command and turn its outcome into an exit code."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime

from greeter import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return its exit code."""
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the greeting program and return the process exit code.

    A normal run returns 0 whatever ``argv`` holds. Only a failure inside the
    program itself, such as a bug, yields a non-zero code.

    Args:
        argv: Command-line arguments; ``sys.argv[1:]`` when None.
        services_factory: Returns the AppServices to run with. Required;
            entry modules pass ``build_production``.

    Raises:
        ValueError: If services_factory is not provided.
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    from .root import cli

    try:
        cli.main(
            args=list(argv) if argv is not None else sys.argv[1:],
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return 0
    except BaseException as exc:  # noqa: BLE001 - reported and mapped by lib_cli_exit_tools
        return _report_failure(exc)
    finally:
        # Shutting down from a worker thread would stop logging for the whole process.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
