"""Greeting use case: turn a :class:`~greeter.domain.person.Person` into text.

Contents:
    * :class:`GreetingService` - stateless formatter with a fixed prefix.
"""

from __future__ import annotations

import logging

from ..domain.behaviors import GREETING_PREFIX, compose_greeting
from ..domain.person import Person

logger = logging.getLogger(__name__)


class GreetingService:
    """Compose greetings for people.

    The prefix and verbose flag are fixed when the service is created and
    never change. The service keeps no reference to the people it greets, so
    repeated calls with the same person return the same text.

    Example:
        >>> GreetingService().greet(Person("Alice"))
        'Hello, Alice'
    """

    __slots__ = ("_prefix", "_verbose")

    def __init__(self) -> None:
        self._prefix = GREETING_PREFIX
        self._verbose = False

    @property
    def prefix(self) -> str:
        """Text placed before every name."""
        return self._prefix

    @property
    def verbose(self) -> bool:
        """Whether greetings carry the verbose suffix."""
        return self._verbose

    def greet(self, person: Person) -> str:
        """Return the greeting for ``person``.

        Args:
            person: Person to greet. Must not be ``None``.

        Returns:
            ``prefix`` followed by ``person.get_name()``.
        """
        name = person.get_name()
        logger.debug("Composing greeting", extra={"person_name": name, "verbose": self._verbose})
        return compose_greeting(self._prefix, name, verbose=self._verbose)

    def print_greeting(self, person: Person) -> None:
        """Write the greeting for ``person`` to standard output."""
        print(self.greet(person))


__all__ = ["GreetingService"]
