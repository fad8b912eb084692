"""Command-line interface: the root command and the process entry function."""

from __future__ import annotations

from .main import main
from .root import cli

__all__ = ["cli", "main"]
