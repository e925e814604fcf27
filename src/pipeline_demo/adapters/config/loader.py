"""Read the layered pipeline-demo configuration.

Layers, lowest to highest precedence: the bundled ``defaultconfig.toml``,
then app, host and user files located by ``__init__conf__``'s vendor, app
and slug, then ``.env``, then slug-prefixed environment variables.
The program reads it once, at startup, to configure logging.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final

from lib_layered_config import Config, read_config

from pipeline_demo import __init__conf__

#: Bundled lowest-precedence layer, shipped inside the wheel.
DEFAULTS_FILE: Final[Path] = Path(__file__).with_name("defaultconfig.toml")


@lru_cache(maxsize=1)
def load_config(*, start_dir: str | None = None) -> Config:
    """Merge every configuration layer into one immutable ``Config``.

    Cached for the life of the process; call ``load_config.cache_clear()``
    to force a re-read.

    Args:
        start_dir: Directory where ``.env`` discovery starts. Defaults to
            the current working directory.

    Example:
        >>> load_config().get("lib_log_rich.console_level")  # doctest: +SKIP
        'WARNING'
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=DEFAULTS_FILE,
        start_dir=start_dir,
    )


__all__ = ["DEFAULTS_FILE", "load_config"]
