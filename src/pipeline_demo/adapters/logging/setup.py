"""Start the lib_log_rich runtime from the ``[lib_log_rich]`` config section.

Contents:
    * :class:`LoggingConfigModel` - validated view of the section.
    * :func:`read_logging_settings` - extract and validate the section.
    * :func:`init_logging` - start the runtime once per process.
"""

from __future__ import annotations

from typing import Any, Final

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, field_validator

from pipeline_demo import __init__conf__

LOGGING_SECTION: Final[str] = "lib_log_rich"

LEVEL_NAMES: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class LoggingConfigModel(BaseModel):
    """Settings handed to ``lib_log_rich.runtime.RuntimeConfig``.

    Keys this model does not name are passed through untouched, so every
    RuntimeConfig option stays reachable from the config files.

    Example:
        >>> LoggingConfigModel(console_level="info").console_level
        'INFO'
        >>> LoggingConfigModel().service == __init__conf__.name
        True
    """

    model_config = ConfigDict(extra="allow")

    service: str = __init__conf__.name
    environment: str = "ci"
    console_level: str = "WARNING"

    @field_validator("console_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LEVEL_NAMES:
            raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(sorted(LEVEL_NAMES))}")
        return level

    def to_runtime_config(self) -> lib_log_rich.runtime.RuntimeConfig:
        return lib_log_rich.runtime.RuntimeConfig(**self.model_dump())


def read_logging_settings(config: Config) -> LoggingConfigModel:
    """Validate the logging section of *config*; a missing section means defaults.

    Raises:
        pydantic.ValidationError: The section holds values the runtime
            would reject.
    """
    section: dict[str, Any] = config.get(LOGGING_SECTION, default=None) or {}
    return LoggingConfigModel.model_validate(section)


def init_logging(config: Config) -> None:
    """Start lib_log_rich and route stdlib ``logging`` through it.

    Does nothing when a runtime is already running in this process.
    ``.env`` loading is switched on first so ``LOG_*`` variables apply.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    settings = read_logging_settings(config)
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(settings.to_runtime_config())
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LEVEL_NAMES",
    "LOGGING_SECTION",
    "LoggingConfigModel",
    "init_logging",
    "read_logging_settings",
]
