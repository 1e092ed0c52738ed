# Copyright 2026 Regg Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for Regg."""

from regg.config.settings import (
    CONFIG_FILE_NAME,
    ConfigError,
    OutputFormat,
    ReggConfig,
    find_config,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "OutputFormat",
    "ReggConfig",
    "find_config",
    "load_config",
]
