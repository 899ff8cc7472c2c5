# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Pydantic models for structured action data.
Provides validation, serialization, and type safety.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ValidationError
from .validators import InputValidator


class RepoStats(BaseModel):
    """Snapshot of a repository's metadata at fetch time."""
    model_config = ConfigDict(frozen=True)

    name: str
    stars: int
    forks: int
    issues: int
    language: str | None = None
    size: int
    created: str | None = None
    updated: str | None = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "RepoStats":
        """
        Map a REST API repository payload onto RepoStats.

        Args:
            data: Decoded ``GET /repos/{owner}/{repo}`` response

        Returns:
            RepoStats with the API fields renamed
        """
        return cls(
            name=data["full_name"],
            stars=data["stargazers_count"],
            forks=data["forks_count"],
            issues=data["open_issues_count"],
            language=data.get("language"),
            size=data["size"],
            created=data.get("created_at"),
            updated=data.get("updated_at"),
        )


class GitHubContext(BaseModel):
    """Workflow context injected by the runner."""
    repository: str = ""
    ref: str | None = None
    sha: str | None = None
    event_name: str | None = None
    actor: str | None = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "GitHubContext":
        """Build the context from the runner's GITHUB_* variables."""
        env = os.environ if env is None else env
        return cls(
            repository=env.get("GITHUB_REPOSITORY", ""),
            ref=env.get("GITHUB_REF") or None,
            sha=env.get("GITHUB_SHA") or None,
            event_name=env.get("GITHUB_EVENT_NAME") or None,
            actor=env.get("GITHUB_ACTOR") or None,
        )

    def model_post_init(self, __context: Any) -> None:
        """Warn once when GITHUB_REPOSITORY is set but unusable."""
        if not self.repository:
            return
        try:
            InputValidator.validate_repository_name(self.repository)
        except ValidationError as e:
            logging.getLogger(__name__).warning(f"GITHUB_REPOSITORY validation failed: {e}")

    def _repo_parts(self) -> tuple[str, str] | None:
        try:
            InputValidator.validate_repository_name(self.repository)
        except ValidationError:
            return None
        owner, repo = self.repository.split("/")
        return owner, repo

    @property
    def owner(self) -> str:
        """Repository owner, empty when the repository is unknown."""
        parts = self._repo_parts()
        return parts[0] if parts else ""

    @property
    def repo(self) -> str:
        """Repository name, empty when the repository is unknown."""
        parts = self._repo_parts()
        return parts[1] if parts else ""


class RunOutcome(BaseModel):
    """Terminal state of a single run."""
    success: bool
    outputs: dict[str, str] = Field(default_factory=dict)
    error: str | None = None
