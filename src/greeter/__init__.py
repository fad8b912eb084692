"""Public package surface: the Person entity and the greeting service.

- Domain exports: :class:`Person` and the greeting constants
- Application exports: :class:`GreetingService`, :func:`run_program`
"""

from __future__ import annotations

from .application.greeting import GreetingService
from .application.program import run_program
from .domain.behaviors import COUNTER_CHECK_MESSAGE, GREETING_PREFIX
from .domain.person import UNNAMED, Person

__all__ = [
    "COUNTER_CHECK_MESSAGE",
    "GREETING_PREFIX",
    "UNNAMED",
    "GreetingService",
    "Person",
    "run_program",
]
