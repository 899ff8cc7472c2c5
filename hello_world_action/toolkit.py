# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Runner toolkit.

Implements the facilities a GitHub Actions runner offers an action: output
files, workflow commands (masking, annotations), failure reporting and the
step summary.
"""

import logging
import secrets
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import GITHUB_OUTPUT_DELIMITER_RANDOM_BYTES
from .exceptions import OutputError
from .summary import SummaryFormatter
from .validators import InputValidator

if TYPE_CHECKING:
    from .config import Config
    from .metadata import ActionMetadata


def escape_data(value: str) -> str:
    """Escape a value for use as workflow command data."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a value for use as a workflow command property."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def issue_command(command: str, message: str = "", **properties: str) -> None:
    """
    Print a workflow command to stdout.

    Args:
        command: Command name (e.g. "add-mask")
        message: Command data
        **properties: Command properties
    """
    props = ",".join(f"{key}={escape_property(value)}" for key, value in properties.items())
    prefix = f"::{command} {props}" if props else f"::{command}"
    print(f"{prefix}::{escape_data(message)}", flush=True)


def write_github_output(outputs: dict[str, str], output_file: Path) -> None:
    """
    Write outputs to GITHUB_OUTPUT file.

    Handles both single-line and multi-line values using proper delimiters.

    Args:
        outputs: Dictionary of output name -> value pairs
        output_file: Path to GITHUB_OUTPUT file
    """
    with open(output_file, "a", encoding="utf-8") as f:
        for name, value in outputs.items():
            value_str = str(value)

            if "\n" in value_str:
                # Multi-line value - use delimiter format
                delimiter = f"EOF_{secrets.token_hex(GITHUB_OUTPUT_DELIMITER_RANDOM_BYTES)}"
                f.write(f"{name}<<{delimiter}\n{value_str}\n{delimiter}\n")
            else:
                f.write(f"{name}={value_str}\n")


class WorkflowCommandFormatter(logging.Formatter):
    """Renders log records as runner annotations where a level maps to one."""

    COMMANDS = {
        logging.DEBUG: "debug",
        logging.WARNING: "warning",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
    }

    def __init__(self):
        super().__init__("%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = self.COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_data(message)}"


class StepSummary:
    """Buffered writer for the GitHub Step Summary file."""

    def __init__(self, summary_file: Path | None, formatter: SummaryFormatter | None = None):
        self.summary_file = summary_file
        self.formatter = formatter or SummaryFormatter()
        self._buffer: list[str] = []

    def add_heading(self, text: str, level: int = 1) -> "StepSummary":
        self._buffer.append(self.formatter.format_heading(text, level))
        return self

    def add_table(self, rows: Sequence[Sequence[Any]]) -> "StepSummary":
        self._buffer.append(self.formatter.format_table(rows))
        return self

    def stringify(self) -> str:
        return "".join(self._buffer)

    def clear(self) -> None:
        self._buffer.clear()

    def write(self) -> None:
        """
        Append the buffered content to the summary file and clear the buffer.

        Raises:
            OutputError: If no summary file is available or it cannot be written
        """
        if not self.summary_file:
            raise OutputError(
                "Unable to find environment variable for $GITHUB_STEP_SUMMARY. "
                "Check if your runtime environment supports job summaries."
            )

        try:
            with open(self.summary_file, "a", encoding="utf-8") as f:
                f.write(self.stringify())
        except OSError as e:
            raise OutputError(f"Unable to write step summary {self.summary_file}: {e}") from e

        self.clear()


class ActionCore:
    """Entry point to the runner facilities used by the action."""

    def __init__(
        self,
        config: "Config",
        metadata: "ActionMetadata | None" = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the toolkit.

        Args:
            config: Configuration object
            metadata: Parsed action.yml, used to check output names
            logger: Optional logger instance
        """
        self.config = config
        self.metadata = metadata
        self.logger = logger or logging.getLogger(__name__)
        self.summary = StepSummary(config.GITHUB_STEP_SUMMARY)
        self.outputs: dict[str, str] = {}
        self.exit_code = 0

    def set_output(self, name: str, value: Any) -> str:
        """
        Publish an action output.

        Args:
            name: Output name
            value: Output value (converted with ``str()``)

        Returns:
            The value as written, without control characters

        Raises:
            ValidationError: If the output name is invalid
            OutputError: If the output file cannot be written
        """
        InputValidator.validate_output_name(name)
        value_str = InputValidator.strip_control_characters(str(value))

        if self.metadata is not None and name not in self.metadata.declared_outputs:
            self.logger.warning(f"Output '{name}' is not declared in action.yml")

        if self.config.GITHUB_OUTPUT:
            try:
                write_github_output({name: value_str}, self.config.GITHUB_OUTPUT)
            except OSError as e:
                raise OutputError(f"Unable to write output '{name}': {e}") from e
        else:
            # Legacy command, understood by the runner and harmless locally
            issue_command("set-output", value_str, name=name)

        self.outputs[name] = value_str
        return value_str

    def set_secret(self, value: str) -> None:
        """Register a value with the runner's log masking."""
        if value:
            issue_command("add-mask", value)

    def set_failed(self, message: str) -> None:
        """Report the run as failed."""
        self.exit_code = 1
        self.logger.error(message)

    @property
    def failed(self) -> bool:
        return self.exit_code != 0
