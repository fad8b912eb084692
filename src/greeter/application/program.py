"""The greeting program run by the command-line entry point.

Contents:
    * :func:`run_program` - greet the default person and run the counter check.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..domain.behaviors import (
    CHECK_COUNTER,
    COUNTER_CHECK_MESSAGE,
    DEFAULT_PERSON_NAME,
    counter_check_passes,
)
from ..domain.person import Person
from .greeting import GreetingService

logger = logging.getLogger(__name__)


def run_program(args: Sequence[str], *, emit: Callable[[str], None]) -> None:
    """Greet :data:`DEFAULT_PERSON_NAME` and report the counter check.

    Emits exactly two lines, ``Hello, Alice`` then ``Counter check passed.``.
    ``args`` is only checked for emptiness and never changes the output.

    Args:
        args: Positional command-line arguments.
        emit: Sink for each output line, e.g. ``click.echo``.

    Example:
        >>> lines: list[str] = []
        >>> run_program([], emit=lines.append)
        >>> lines
        ['Hello, Alice', 'Counter check passed.']
    """
    person = Person(DEFAULT_PERSON_NAME)
    service = GreetingService()

    emit(service.greet(person))

    if counter_check_passes(CHECK_COUNTER):
        emit(COUNTER_CHECK_MESSAGE)

    if not args:
        logger.debug("No arguments supplied")


__all__ = ["run_program"]
