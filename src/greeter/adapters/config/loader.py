"""Read the layered configuration once per process.

Only the ``[lib_log_rich]`` section is consumed; greeting text is never
configurable.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final

from lib_layered_config import Config, read_config

from greeter import __init__conf__

#: Bundled defaults forming the lowest configuration layer.
DEFAULT_CONFIG_FILE: Final[Path] = Path(__file__).with_name("defaultconfig.toml")


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Merge the bundled defaults with app, host, user, ``.env`` and environment layers.

    The result is cached; call ``get_config.cache_clear()`` to force a re-read.

    Example:
        >>> get_config().get("missing", default="fallback")
        'fallback'
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=DEFAULT_CONFIG_FILE,
    )


__all__ = ["DEFAULT_CONFIG_FILE", "get_config"]
