"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.greeting` - The greeting service use case
    * :mod:`.program` - The command-line greeting program
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .greeting import GreetingService
from .ports import (
    GetConfig,
    InitLogging,
)
from .program import run_program

__all__ = [
    "GetConfig",
    "GreetingService",
    "InitLogging",
    "run_program",
]
