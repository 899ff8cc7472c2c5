# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Main entry point for the hello world action.
Resolves inputs, builds the greeting, optionally fetches repository
statistics, and publishes outputs and the step summary.

Local runs read inputs from the environment, for example:

    INPUT_WHO_TO_GREET="Local Dev" INPUT_INCLUDE_TIME="true" \\
        python -m hello_world_action.main

Repository statistics additionally need INPUT_GITHUB_TOKEN and
GITHUB_REPOSITORY ("owner/repo").
"""

import logging
import sys
from typing import Any

from .config import get_config
from .constants import (
    DEFAULT_MESSAGE_PREFIX,
    DEFAULT_WHO_TO_GREET,
    DEMO_SECRET_VALUE,
    SUMMARY_FALLBACK_TITLE,
    SUMMARY_HEADING,
)
from .exceptions import ConfigurationError
from .github_api import get_repo_stats
from .greeting import create_greeting, get_current_time
from .inputs import InputResolver
from .metadata import load_metadata
from .models import GitHubContext, RepoStats, RunOutcome
from .toolkit import ActionCore, WorkflowCommandFormatter

LOGGER_NAME = "hello-world-action"


def setup_logging() -> logging.Logger:
    """
    Configure logging based on debug mode.

    Records go to stdout so the runner picks up annotation commands.

    Returns:
        Configured logger instance
    """
    try:
        debug = get_config().DEBUG_MODE
    except ConfigurationError:
        # Reported again, as a run failure, once the run starts
        debug = False

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(WorkflowCommandFormatter())
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, handlers=[handler])

    return logging.getLogger(LOGGER_NAME)


def build_summary_table(
    greeting: str,
    current_time: str | None = None,
    repo_stats: RepoStats | None = None,
) -> list[list[str]]:
    """
    Build the summary table rows.

    Args:
        greeting: Generated greeting
        current_time: Timestamp, when include-time is enabled
        repo_stats: Repository statistics, when fetched

    Returns:
        Header row followed by data rows
    """
    table = [
        ["Field", "Value"],
        ["Greeting", greeting],
    ]
    if current_time:
        table.append(["Timestamp", current_time])
    if repo_stats:
        table.extend([
            ["Repository", repo_stats.name],
            ["⭐ Stars", str(repo_stats.stars)],
            ["🍴 Forks", str(repo_stats.forks)],
            ["🐛 Open Issues", str(repo_stats.issues)],
            ["📝 Language", repo_stats.language or "Unknown"],
        ])
    return table


def write_summary(core: ActionCore, table: list[list[str]], logger: logging.Logger) -> bool:
    """
    Write the results table to the step summary, or to the log if unavailable.

    Args:
        core: Runner toolkit
        table: Rows from build_summary_table
        logger: Logger used for the console fallback

    Returns:
        True if the step summary was written
    """
    try:
        core.summary.add_heading(SUMMARY_HEADING).add_table(table).write()
        return True
    except Exception as e:
        logger.debug(f"Step summary unavailable: {e}")
        core.summary.clear()

    logger.info(SUMMARY_FALLBACK_TITLE)
    for field, value in table[1:]:
        logger.info(f"   {field}: {value}")
    return False


def _default_core(logger: logging.Logger) -> ActionCore:
    config = get_config()
    return ActionCore(config, load_metadata(config.ACTION_PATH, logger), logger=logger)


def run(
    core: ActionCore | None = None,
    context: GitHubContext | None = None,
    inputs: InputResolver | None = None,
    logger: logging.Logger | None = None,
) -> RunOutcome:
    """
    Run the action.

    Never raises: any error is reported through ``core.set_failed`` and
    returned as a failed outcome.

    Args:
        core: Runner toolkit (built from the environment if omitted)
        context: Workflow context (read from GITHUB_* variables if omitted)
        inputs: Input resolver (default provider chain if omitted)
        logger: Optional logger instance

    Returns:
        Outcome with the outputs published during the run
    """
    logger = logger or logging.getLogger(LOGGER_NAME)
    published: dict[str, str] = {}

    def publish(name: str, value: Any) -> None:
        published[name] = core.set_output(name, value)

    try:
        if core is None:
            core = _default_core(logger)
        if context is None:
            context = GitHubContext.from_env()
        if inputs is None:
            inputs = InputResolver.from_environment(metadata=core.metadata)

        who_to_greet = inputs.get("who-to-greet") or DEFAULT_WHO_TO_GREET
        include_time = inputs.get_boolean("include-time")
        message_prefix = inputs.get("message-prefix") or DEFAULT_MESSAGE_PREFIX
        github_token = inputs.get("github-token")

        if github_token:
            core.set_secret(github_token)

        logger.info("Starting Hello World Action...")
        logger.info(f"Who to greet: {who_to_greet}")
        logger.info(f"Message prefix: {message_prefix}")
        logger.info(f"Include time: {str(include_time).lower()}")
        logger.info(f"GitHub token provided: {'Yes' if github_token else 'No'}")

        greeting = create_greeting(message_prefix, who_to_greet)
        logger.info(f"Generated greeting: {greeting}")
        publish("message", greeting)

        current_time = None
        if include_time:
            current_time = get_current_time()
            logger.info(f"Current time: {current_time}")
            publish("time", current_time)

        repo_stats = None
        if github_token and context.owner and context.repo:
            logger.info("Fetching repository statistics...")
            repo_stats = get_repo_stats(github_token, context.owner, context.repo, logger=logger)

            if repo_stats:
                logger.info(f"Repository: {repo_stats.name}")
                logger.info(f"⭐ Stars: {repo_stats.stars}")
                logger.info(f"🍴 Forks: {repo_stats.forks}")
                logger.info(f"🐛 Open Issues: {repo_stats.issues}")
                logger.info(f"📝 Language: {repo_stats.language or 'Unknown'}")
                publish("repo-stats", repo_stats.model_dump_json())
        elif github_token:
            logger.debug("Repository not resolved from context, skipping statistics")

        # Registered values are masked in all later log output
        core.set_secret(DEMO_SECRET_VALUE)

        write_summary(core, build_summary_table(greeting, current_time, repo_stats), logger)

        logger.info("✅ Action completed successfully!")
        return RunOutcome(success=True, outputs=published)

    except Exception as e:
        message = f"Action failed with error: {e}"
        if core is None:
            logger.error(message)
        else:
            core.set_failed(message)
        return RunOutcome(success=False, outputs=published, error=message)


def main() -> int:
    """
    Main execution function.

    Returns:
        Process exit code: 0 on success, 1 on failure
    """
    logger = setup_logging()
    outcome = run(logger=logger)
    return 0 if outcome.success else 1


if __name__ == "__main__":
    sys.exit(main())
