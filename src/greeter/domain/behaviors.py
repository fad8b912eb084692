"""Pure domain functions and constants with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

#: Text placed before the person's name in every greeting.
GREETING_PREFIX: Final[str] = "Hello, "

#: Suffix appended to a greeting when verbose mode is enabled.
VERBOSE_SUFFIX: Final[str] = " [verbose mode]"

#: Name of the person greeted by the command-line program.
DEFAULT_PERSON_NAME: Final[str] = "Alice"

#: Fixed counter value evaluated by :func:`counter_check_passes`.
CHECK_COUNTER: Final[int] = 42

#: Line printed once the counter check succeeds.
COUNTER_CHECK_MESSAGE: Final[str] = "Counter check passed."


def compose_greeting(prefix: str, name: str, *, verbose: bool = False) -> str:
    """Concatenate ``prefix`` and ``name``, adding the verbose suffix on request.

    Args:
        prefix: Leading greeting text, e.g. ``"Hello, "``.
        name: Name to greet, used verbatim.
        verbose: Append :data:`VERBOSE_SUFFIX` when true.

    Returns:
        The composed greeting.

    Example:
        >>> compose_greeting(GREETING_PREFIX, "Alice")
        'Hello, Alice'
        >>> compose_greeting(GREETING_PREFIX, "Alice", verbose=True)
        'Hello, Alice [verbose mode]'
    """
    greeting = prefix + name
    if verbose:
        greeting += VERBOSE_SUFFIX
    return greeting


def counter_check_passes(counter: int = CHECK_COUNTER) -> bool:
    r"""Return whether ``counter`` is positive or greater than -100.

    Any counter above -100 passes, which includes the fixed
    :data:`CHECK_COUNTER`.

    Example:
        >>> counter_check_passes()
        True
        >>> counter_check_passes(-100)
        False
    """
    return counter > 0 or counter > -100


__all__ = [
    "CHECK_COUNTER",
    "COUNTER_CHECK_MESSAGE",
    "DEFAULT_PERSON_NAME",
    "GREETING_PREFIX",
    "VERBOSE_SUFFIX",
    "compose_greeting",
    "counter_check_passes",
]
