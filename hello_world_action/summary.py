# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Markdown formatter for GitHub Step Summary.
Generates the heading and table written to the action summary.
"""

from collections.abc import Sequence
from typing import Any


class SummaryFormatter:
    """Formats summary content as Markdown."""

    def format_heading(self, text: str, level: int = 1) -> str:
        """
        Format a Markdown heading.

        Args:
            text: Heading text
            level: Heading level, clamped to 1-6

        Returns:
            Heading line followed by a blank line
        """
        level = min(max(level, 1), 6)
        return f"{'#' * level} {text}\n\n"

    def format_table(self, rows: Sequence[Sequence[Any]]) -> str:
        """
        Format rows as a Markdown table.

        The first row is the header. Values are converted with ``str()``
        and ``None`` renders as an empty cell.

        Args:
            rows: Header row followed by data rows

        Returns:
            Markdown table followed by a blank line, or an empty string
            when there are no rows
        """
        if not rows:
            return ""

        header, *body = rows
        lines = [
            "| " + " | ".join(self._cell(value) for value in header) + " |",
            "| " + " | ".join("-" * max(len(str(value)), 3) for value in header) + " |",
        ]
        for row in body:
            lines.append("| " + " | ".join(self._cell(value) for value in row) + " |")

        return "\n".join(lines) + "\n\n"

    def _cell(self, value: Any) -> str:
        return self._escape_markdown("" if value is None else str(value))

    def _escape_markdown(self, text: str) -> str:
        """
        Escape special markdown characters.

        Args:
            text: Text to escape

        Returns:
            Escaped text safe for a table cell
        """
        # Escape backticks and pipes
        return text.replace("`", "\\`").replace("|", "\\|").replace("\n", " ")
