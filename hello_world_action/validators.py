# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Input validation and sanitization utilities.
Provides checks for workflow context values and action outputs.
"""

import re

from .constants import (
    MAX_REPOSITORY_NAME_LENGTH,
    MAX_REPOSITORY_OWNER_LENGTH,
)
from .exceptions import ValidationError


class InputValidator:
    """Validates and sanitizes values exchanged with the runner."""

    # Repository name: owner/repo format
    REPO_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_.-]+/[a-zA-Z0-9_.-]+$")

    # Output name: identifier-like, dashes allowed (e.g. "repo-stats")
    OUTPUT_NAME_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_-]*$")

    @staticmethod
    def validate_repository_name(repo_name: str) -> str:
        """
        Validate a GitHub repository name (owner/repo format).

        Args:
            repo_name: Repository name to validate

        Returns:
            Validated repository name

        Raises:
            ValidationError: If repository name is invalid
        """
        if not repo_name:
            raise ValidationError("Repository name cannot be empty")

        if not InputValidator.REPO_NAME_PATTERN.match(repo_name):
            raise ValidationError(
                f"Repository name must be in 'owner/repo' format. "
                f"Got: {repo_name}"
            )

        parts = repo_name.split("/")
        if len(parts[0]) > MAX_REPOSITORY_OWNER_LENGTH:
            raise ValidationError(f"Owner name too long: {parts[0]}")
        if len(parts[1]) > MAX_REPOSITORY_NAME_LENGTH:
            raise ValidationError(f"Repository name too long: {parts[1]}")

        return repo_name

    @staticmethod
    def validate_output_name(name: str) -> str:
        """
        Validate an action output name.

        Raises:
            ValidationError: If the name is empty or contains characters
                the output file format cannot carry
        """
        if not name or not InputValidator.OUTPUT_NAME_PATTERN.fullmatch(name):
            raise ValidationError(f"Invalid output name: {name!r}")
        return name

    @staticmethod
    def strip_control_characters(value: str) -> str:
        """
        Remove control characters from a string for GitHub Action output.

        Newlines and tabs are kept; multi-line values are written with a
        heredoc delimiter.

        Args:
            value: String to clean

        Returns:
            String without null bytes or other control characters
        """
        if not value:
            return ""

        return re.sub(r"[\x00-\x08\x0B-\x0C\x0E-\x1F\x7F]", "", value)
