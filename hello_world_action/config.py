# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Configuration module for the hello world action.
Handles runner environment variables, defaults, and validation.
"""

import os
from collections.abc import Mapping
from pathlib import Path

from .constants import TRUTHY_VALUES
from .exceptions import ConfigurationError

# Repository root, where action.yml lives when GITHUB_ACTION_PATH is unset
_DEFAULT_ACTION_PATH = Path(__file__).resolve().parent.parent


class Config:
    """Configuration singleton for the action."""

    GITHUB_OUTPUT: Path | None
    GITHUB_STEP_SUMMARY: Path | None
    ACTION_PATH: Path
    DEBUG_MODE: bool

    def __init__(self, env: Mapping[str, str] | None = None):
        """
        Initialize configuration from environment.

        Args:
            env: Environment mapping (defaults to os.environ)
        """
        self._env = os.environ if env is None else env
        self._load_runner_files()
        self._load_options()

    def _load_runner_files(self) -> None:
        """Load the file paths the runner provides for outputs and summaries."""
        # Both are absent when running outside GitHub Actions
        self.GITHUB_OUTPUT = self._optional_path("GITHUB_OUTPUT")
        self.GITHUB_STEP_SUMMARY = self._optional_path("GITHUB_STEP_SUMMARY")

        action_path = self._env.get("GITHUB_ACTION_PATH")
        self.ACTION_PATH = Path(action_path) if action_path else _DEFAULT_ACTION_PATH

    def _load_options(self) -> None:
        """Load optional behaviour switches."""
        debug_str = self._env.get("DEBUG_MODE", "false").lower()
        self.DEBUG_MODE = debug_str in TRUTHY_VALUES or self._env.get("RUNNER_DEBUG") == "1"

    def _optional_path(self, name: str) -> Path | None:
        value = self._env.get(name)
        if not value:
            return None
        # Just check for dangerous characters, don't validate as path component
        if "\x00" in value or "\n" in value or "\r" in value:
            raise ConfigurationError(f"Invalid {name}: contains null bytes or newlines")
        return Path(value)


# Global config instance
_config_instance: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance
