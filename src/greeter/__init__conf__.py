"""Static package metadata surfaced to the CLI and configuration loader.

Contents:
    * Distribution metadata (name, title, version, shell command).
    * :data:`LAYEREDCONF_VENDOR`, :data:`LAYEREDCONF_APP`, :data:`LAYEREDCONF_SLUG` -
      identifiers lib_layered_config uses to derive platform-specific paths.
"""

from __future__ import annotations

from typing import Final

#: Distribution name declared in ``pyproject.toml``.
name: Final[str] = "greeter"
#: Human-readable summary shown in CLI help output.
title: Final[str] = "Greet a person and run the counter check"
#: Current release version, kept in sync with ``pyproject.toml``.
version: Final[str] = "1.0.0"
#: Console-script name published by the package.
shell_command: Final[str] = "greeter"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: Final[str] = "example"
#: Application identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: Final[str] = "Greeter"
#: Slug used for XDG paths and environment variable prefixes on Linux.
LAYEREDCONF_SLUG: Final[str] = "greeter"

__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "name",
    "shell_command",
    "title",
    "version",
]
