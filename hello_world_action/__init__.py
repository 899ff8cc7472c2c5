# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Hello World Action - Python Implementation

A template GitHub Action that greets someone, optionally timestamps the
greeting and reports repository statistics.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("hello-world-action")
except PackageNotFoundError:
    # Package not installed, use fallback version
    __version__ = "0.0.0+dev"

__author__ = "The Linux Foundation"
