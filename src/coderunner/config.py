"""Runner configuration — environment variables plus an optional YAML file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from coderunner.errors import ConfigError


class RunnerSettings(BaseSettings):
    """Limits and runtime options read once at startup.

    Every field can be overridden with a ``CODERUNNER_`` prefixed
    environment variable, e.g. ``CODERUNNER_EXECUTION_TIMEOUT_MS=5000``.
    """

    model_config = SettingsConfigDict(env_prefix="CODERUNNER_", extra="ignore")

    execution_timeout_ms: int = Field(default=10_000, gt=0, description="Wall-clock budget per execution.")
    max_code_length: int = Field(default=10_000, gt=0, description="Maximum source length in code points.")
    node_binary: str = Field(default="node", description="Node.js executable name or path.")
    memory_limit_mb: int = Field(default=128, gt=0, description="V8 old-space heap cap for the sandbox.")
    startup_grace_ms: int = Field(
        default=2_000,
        ge=0,
        description="Extra time granted to process startup before the sandbox is killed.",
    )
    max_output_bytes: int = Field(default=1_048_576, gt=0, description="Cap on captured output size.")


def load_settings(path: Path | None = None) -> RunnerSettings:
    """Build settings from the environment and, optionally, a YAML file.

    Values in the file take precedence over environment variables.
    ``${VAR}`` references in the file are expanded before parsing.

    Raises:
        ConfigError: If the file cannot be read, parsed, or validated.
    """
    if path is None:
        return RunnerSettings()

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    try:
        data: Any = yaml.safe_load(os.path.expandvars(raw))
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAML parse error: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Config YAML must be a mapping")

    try:
        return RunnerSettings(**data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
