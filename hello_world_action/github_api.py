# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
GitHub API client wrapper using PyGithub.
Provides the repository statistics lookup used by the action.
"""

import logging
from typing import Literal

from github import Auth, Github
from github.GithubException import GithubException
from github.Repository import Repository

from .exceptions import GitHubAPIError
from .models import RepoStats


class GitHubAPI:
    """Wrapper around PyGithub for common operations with context manager support."""

    def __init__(self, token: str | None = None, logger: logging.Logger | None = None):
        """
        Initialize GitHub API client.

        Args:
            token: GitHub authentication token (optional)
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

        if token:
            self.client = Github(auth=Auth.Token(token), retry=None)
            self.logger.debug("GitHub API client initialized with token")
        else:
            self.client = Github(retry=None)
            self.logger.debug("GitHub API client initialized without authentication")

    def get_repository(self, repo_name: str) -> Repository:
        """
        Get repository object.

        Args:
            repo_name: Full repository name (owner/repo)

        Returns:
            Repository object

        Raises:
            GitHubAPIError: If repository cannot be accessed
        """
        try:
            repo = self.client.get_repo(repo_name)
        except GithubException as e:
            raise GitHubAPIError(f"Failed to get repository {repo_name}: {e}") from e

        self.logger.debug(f"Successfully fetched repository: {repo_name}")
        return repo

    def close(self):
        """Close the GitHub API client connection."""
        try:
            self.client.close()
        except Exception as e:
            self.logger.debug(f"Failed to close GitHub API client: {e}")
            return
        self.logger.debug("GitHub API client closed")

    def __enter__(self):
        """Context manager entry - return self for use in with statement."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> Literal[False]:
        """Context manager exit - ensure client is closed."""
        self.close()
        return False  # Don't suppress exceptions


def get_repo_stats(
    token: str,
    owner: str,
    repo: str,
    logger: logging.Logger | None = None,
) -> RepoStats | None:
    """
    Fetch repository statistics.

    Any failure (network, authentication, missing repository, rate limit,
    unexpected payload) is logged as a warning and reported as ``None``.

    Args:
        token: GitHub token
        owner: Repository owner
        repo: Repository name
        logger: Optional logger instance

    Returns:
        RepoStats, or None if the repository could not be read
    """
    logger = logger or logging.getLogger(__name__)
    try:
        with GitHubAPI(token, logger=logger) as api:
            repository = api.get_repository(f"{owner}/{repo}")
            stats = RepoStats.from_api(repository.raw_data)
    except Exception as e:
        logger.warning(f"Failed to fetch repository stats: {e}")
        return None
    return stats
