# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Custom exceptions for the hello world action.
"""


class ActionError(Exception):
    """Base exception for action errors."""


class ConfigurationError(ActionError):
    """Raised when configuration or action metadata is invalid."""


class GitHubAPIError(ActionError):
    """Raised when GitHub API operations fail."""


class ValidationError(ActionError):
    """Raised when data validation fails."""


class OutputError(ActionError):
    """Raised when an output or the step summary cannot be written."""
