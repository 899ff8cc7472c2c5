# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Greeting and timestamp helpers.
"""

from datetime import datetime, timezone
from typing import Any


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def create_greeting(prefix: Any, name: Any) -> str:
    """
    Create a greeting message.

    ``None`` renders as an empty string; other non-string values are
    rendered with ``str()``.

    Args:
        prefix: Message prefix (e.g., "Hello")
        name: Name to greet

    Returns:
        Formatted greeting, e.g. "Hello, World!"
    """
    return f"{_as_text(prefix)}, {_as_text(name)}!"


def get_current_time(now: datetime | None = None) -> str:
    """
    Get a timestamp in ISO-8601 format with millisecond precision.

    Args:
        now: Instant to format (defaults to the current time). Naive values
            are taken as UTC.

    Returns:
        Timestamp such as "2023-01-01T12:00:00.000Z"
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)

    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
