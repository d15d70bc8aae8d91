"""Configuration for the abi2ts generator.

Settings come from three layers: explicit overrides (typically parsed
command-line flags), ``ABI2TS_*`` environment variables, and the defaults
declared on ``CodegenConfig``.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from abi2ts.errors import ConfigError

_ENV_PREFIX = "ABI2TS_"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class CodegenConfig(BaseModel):
    """Settings for one generator run.

    Attributes:
        source: Directory that is searched for ABI artifacts.
        out_dir: Directory the TypeScript files are written to.
        pattern: Glob pattern, relative to ``source``, selecting artifacts.
        extension: Extension of generated files, including the dot.
        debug_suffix: File-name ending of compiler debug files to skip.
        max_workers: Worker threads for extraction and generation; None lets
            the executor pick.
        log_level: Name of the logging level.
    """
    model_config = ConfigDict(frozen=True)

    source: Path
    out_dir: Path = Path("./abis")
    pattern: str = "**/*.json"
    extension: str = ".ts"
    debug_suffix: str = ".dbg.json"
    max_workers: Optional[int] = Field(default=None, gt=0)
    log_level: str = "INFO"

    @field_validator("extension")
    @classmethod
    def _extension_has_dot(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("extension must start with '.'")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


def _env(name: str) -> Optional[str]:
    value = os.environ.get(_ENV_PREFIX + name)
    return value if value else None


def load_config_from_env(*, overrides: Optional[dict] = None) -> CodegenConfig:
    """
    Build a CodegenConfig from environment variables with optional overrides.

    Args:
        overrides: Values that take precedence over the environment. Keys
            mapped to None are ignored.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If no source directory is configured or a value is invalid.
    """
    overrides = {k: v for k, v in (overrides or {}).items() if v is not None}

    values = {}
    for field_name in CodegenConfig.model_fields:
        if field_name in overrides:
            values[field_name] = overrides[field_name]
        else:
            env_value = _env(field_name.upper())
            if env_value is not None:
                values[field_name] = env_value

    if "source" not in values:
        raise ConfigError(f"No source directory given; pass --source or set {_ENV_PREFIX}SOURCE")

    try:
        return CodegenConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
