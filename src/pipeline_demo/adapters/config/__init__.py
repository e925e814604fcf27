"""Configuration adapter: lib_layered_config loading with bundled defaults."""

from __future__ import annotations

from .loader import DEFAULTS_FILE, load_config

__all__ = ["DEFAULTS_FILE", "load_config"]
