# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Constants used throughout the hello world action.
Centralizes defaults and limits for maintainability.
"""

# Input defaults
DEFAULT_WHO_TO_GREET = "World"
DEFAULT_MESSAGE_PREFIX = "Hello"

# Values accepted as boolean true for inputs (compared lower-cased)
TRUTHY_VALUES = ("true", "1", "yes")

# Demonstration value registered with the runner's secret masking
DEMO_SECRET_VALUE = "my-secret-value"

# Step summary
SUMMARY_HEADING = "🎯 Hello World Action Results"
SUMMARY_FALLBACK_TITLE = "📊 Hello World Action Results:"

# Validation limits
MAX_REPOSITORY_OWNER_LENGTH = 39  # GitHub username maximum length
MAX_REPOSITORY_NAME_LENGTH = 100  # GitHub repository name maximum length

# Security token generation
GITHUB_OUTPUT_DELIMITER_RANDOM_BYTES = 8  # Number of random bytes for output delimiter

# Action metadata file name
ACTION_METADATA_FILE = "action.yml"
