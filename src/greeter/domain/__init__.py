"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.person` - The Person value object
    * :mod:`.behaviors` - Greeting composition and the counter check
"""

from __future__ import annotations

from .behaviors import (
    CHECK_COUNTER,
    COUNTER_CHECK_MESSAGE,
    DEFAULT_PERSON_NAME,
    GREETING_PREFIX,
    VERBOSE_SUFFIX,
    compose_greeting,
    counter_check_passes,
)
from .person import UNNAMED, Person

__all__ = [
    # Entities
    "UNNAMED",
    "Person",
    # Behaviors
    "CHECK_COUNTER",
    "COUNTER_CHECK_MESSAGE",
    "DEFAULT_PERSON_NAME",
    "GREETING_PREFIX",
    "VERBOSE_SUFFIX",
    "compose_greeting",
    "counter_check_passes",
]
