"""The root command: start logging, then run the greeting program.

The command declares no options. Whatever is passed on the command line is
collected into ``ARGS`` and only checked for emptiness by the program.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import rich_click as click

from greeter import __init__conf__
from greeter.application.program import run_program

from .constants import ROOT_CONTEXT_SETTINGS

if TYPE_CHECKING:
    from greeter.composition import AppServices

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _bind_run_context() -> Iterator[None]:
    """Tag log records emitted during the run; a no-op without a logging runtime."""
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id="greeter-run", extra={"command": __init__conf__.shell_command}):
        yield


@click.command(
    __init__conf__.shell_command,
    help=__init__conf__.title,
    context_settings=ROOT_CONTEXT_SETTINGS,
    add_help_option=False,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Print the greeting and the counter check line.

    ``ctx.obj`` is the services factory from :func:`greeter.adapters.cli.main.main`
    or from the test suite.

    Example:
        >>> from click.testing import CliRunner
        >>> from greeter.composition import build_testing
        >>> CliRunner().invoke(cli, ["--help"], obj=build_testing).stdout
        'Hello, Alice\\nCounter check passed.\\n'
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    services.init_logging(services.get_config())

    with _bind_run_context():
        logger.info("Running greeting program")
        run_program(args, emit=click.echo)


__all__ = ["cli"]
