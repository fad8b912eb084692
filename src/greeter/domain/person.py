"""Person value object: the single named entity the program greets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

#: Name reported for a person constructed without a usable name.
UNNAMED: Final[str] = "Unnamed"


@dataclass(frozen=True, slots=True)
class Person:
    """Immutable named individual.

    The stored name is kept exactly as given: no trimming, no case folding.
    ``None`` and the empty string are accepted and read back as
    :data:`UNNAMED`.

    Attributes:
        name: Display name as supplied at construction.

    Example:
        >>> Person("Alice").get_name()
        'Alice'
        >>> Person("  Bob ").get_name()
        '  Bob '
        >>> Person("").get_name()
        'Unnamed'
    """

    name: str | None

    def get_name(self) -> str:
        """Return the stored name, or :data:`UNNAMED` when it is missing or empty.

        Example:
            >>> Person(None).get_name()
            'Unnamed'
        """
        if self.name:
            return self.name
        return UNNAMED


__all__ = ["UNNAMED", "Person"]
