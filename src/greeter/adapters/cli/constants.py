"""Shared CLI constants."""

from __future__ import annotations

from typing import Any, Final

#: The root command owns no options: every token, including ones that look
#: like ``--help`` or ``--version``, is collected into ``ARGS`` and ignored.
ROOT_CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "allow_interspersed_args": False,
}

#: Characters of traceback printed for an unexpected failure.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Characters printed when ``lib_cli_exit_tools.config.traceback`` is enabled.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = ["ROOT_CONTEXT_SETTINGS", "TRACEBACK_SUMMARY_LIMIT", "TRACEBACK_VERBOSE_LIMIT"]
