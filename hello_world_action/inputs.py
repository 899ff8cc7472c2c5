# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Action input resolution.

Inputs are looked up through an ordered chain of providers; the first one
that yields a non-empty value wins. The default chain reads the variable the
runner sets for Docker and JavaScript actions (``INPUT_WHO-TO-GREET``), then
the underscore form used when a composite action exports its inputs
explicitly or when the action is run locally (``INPUT_WHO_TO_GREET``).
"""

import os
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING

from .constants import TRUTHY_VALUES

if TYPE_CHECKING:
    from .metadata import ActionMetadata

InputProvider = Callable[[str], str | None]


def host_input_name(name: str) -> str:
    """Variable name the runner uses for an input (spaces to underscores)."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def env_fallback_name(name: str) -> str:
    """Upper-snake-case variable name for an input."""
    return f"INPUT_{name.replace('-', '_').replace(' ', '_').upper()}"


def host_input_provider(env: Mapping[str, str]) -> InputProvider:
    """Provider reading inputs the way the runner injects them."""
    def lookup(name: str) -> str | None:
        return env.get(host_input_name(name))
    return lookup


def env_fallback_provider(env: Mapping[str, str]) -> InputProvider:
    """Provider reading ``INPUT_<NAME_UPPER_SNAKE>`` variables."""
    def lookup(name: str) -> str | None:
        return env.get(env_fallback_name(name))
    return lookup


def metadata_default_provider(metadata: "ActionMetadata") -> InputProvider:
    """Provider returning the default declared for an input in action.yml."""
    return metadata.input_default


class InputResolver:
    """Resolves named action inputs through an ordered provider chain."""

    def __init__(self, providers: Sequence[InputProvider]):
        self.providers = list(providers)

    @classmethod
    def from_environment(
        cls,
        env: Mapping[str, str] | None = None,
        metadata: "ActionMetadata | None" = None,
    ) -> "InputResolver":
        """
        Build the default provider chain.

        Args:
            env: Environment mapping (defaults to os.environ)
            metadata: Parsed action.yml; adds its input defaults as last resort

        Returns:
            Configured resolver
        """
        env = os.environ if env is None else env
        providers = [host_input_provider(env), env_fallback_provider(env)]
        if metadata is not None:
            providers.append(metadata_default_provider(metadata))
        return cls(providers)

    def get(self, name: str) -> str:
        """Return the first non-empty value for ``name``, or an empty string."""
        for provider in self.providers:
            value = provider(name)
            if value and value.strip():
                return value.strip()
        return ""

    def get_boolean(self, name: str) -> bool:
        """
        Return the input as a boolean.

        More permissive than the runner's YAML 1.2 boolean rules: only
        ``true``, ``1`` and ``yes`` (any case) are true, everything else
        (including an unset input) is false.
        """
        return self.get(name).lower() in TRUTHY_VALUES
