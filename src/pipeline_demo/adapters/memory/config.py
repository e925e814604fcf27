"""Configuration that never touches the filesystem."""

from __future__ import annotations

from lib_layered_config import Config

#: Console logging stays at WARNING so stdout carries only command output.
QUIET_LOGGING_SECTION: dict[str, str] = {"console_level": "WARNING"}


def load_config_in_memory(*, start_dir: str | None = None) -> Config:
    """Return a Config holding only a quiet ``[lib_log_rich]`` section.

    Example:
        >>> load_config_in_memory().get("lib_log_rich.console_level")
        'WARNING'
    """
    return Config({"lib_log_rich": dict(QUIET_LOGGING_SECTION)}, {})


__all__ = ["QUIET_LOGGING_SECTION", "load_config_in_memory"]
