"""Logging adapter: lib_log_rich runtime built from layered configuration."""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging, read_logging_settings

__all__ = ["LoggingConfigModel", "init_logging", "read_logging_settings"]
