# Copyright 2026 Regg Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration model and YAML loader for ``.regg.yaml``."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from regg.scanner.lexer import FenceMode

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".regg.yaml"

OutputFormat = Literal["text", "json"]


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class ReggConfig(BaseModel):
    """Settings that control scanning and token output."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    fence_mode: FenceMode = Field(alias="fence-mode", default=FenceMode.EXACT)
    output_format: OutputFormat = Field(alias="output-format", default="text")


def load_config(path: Path) -> ReggConfig:
    """Load and validate a configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.regg.yaml`` file.

    Returns:
        A validated ReggConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: configuration must be a YAML mapping")

    try:
        return ReggConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_config(directory: Path) -> Path | None:
    """Return the nearest ``.regg.yaml`` in *directory* or its parents, if any."""
    directory = directory.resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None
