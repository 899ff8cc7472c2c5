# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Action metadata (action.yml) loading.
"""

import logging
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]  # PyYAML doesn't have complete type stubs

from .constants import ACTION_METADATA_FILE
from .exceptions import ConfigurationError


class ActionMetadata:
    """Inputs and outputs declared in action.yml."""

    def __init__(self, data: dict[str, Any]):
        self.name: str = str(data.get("name", ""))
        self.inputs: dict[str, dict[str, Any]] = data.get("inputs") or {}
        self.outputs: dict[str, dict[str, Any]] = data.get("outputs") or {}

    @classmethod
    def load(cls, path: Path) -> "ActionMetadata":
        """
        Parse an action.yml file.

        Args:
            path: Path to action.yml

        Returns:
            Parsed metadata

        Raises:
            ConfigurationError: If the file is missing or not a YAML mapping
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read action metadata {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Action metadata {path} is not a mapping")
        return cls(data)

    def input_default(self, name: str) -> str | None:
        """Default declared for an input, or None."""
        default = (self.inputs.get(name) or {}).get("default")
        if default is None:
            return None
        # YAML may parse unquoted defaults such as `false` into bools
        if isinstance(default, bool):
            return str(default).lower()
        return str(default)

    @property
    def declared_outputs(self) -> set[str]:
        """Names of the outputs declared by the action."""
        return set(self.outputs)


def load_metadata(action_path: Path, logger: logging.Logger | None = None) -> ActionMetadata | None:
    """
    Load action.yml from the action directory, if present.

    Args:
        action_path: Directory containing action.yml
        logger: Optional logger instance

    Returns:
        Parsed metadata, or None when unavailable
    """
    logger = logger or logging.getLogger(__name__)
    try:
        metadata = ActionMetadata.load(action_path / ACTION_METADATA_FILE)
    except ConfigurationError as e:
        logger.debug(f"Action metadata not loaded: {e}")
        return None
    logger.debug(f"Loaded action metadata: {metadata.name}")
    return metadata
