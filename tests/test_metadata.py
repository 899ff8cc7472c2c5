# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Tests for action metadata loading.
"""

from pathlib import Path

import pytest

from hello_world_action.exceptions import ConfigurationError
from hello_world_action.metadata import ActionMetadata, load_metadata

REPO_ROOT = Path(__file__).resolve().parent.parent


class TestActionMetadata:
    """Tests for ActionMetadata."""

    def test_load_repository_action_yml(self):
        """Test the action.yml shipped with the action."""
        metadata = ActionMetadata.load(REPO_ROOT / "action.yml")

        assert metadata.name == "Hello World Action"
        assert set(metadata.inputs) == {"who-to-greet", "include-time", "message-prefix", "github-token"}
        assert metadata.declared_outputs == {"message", "time", "repo-stats"}
        assert metadata.input_default("who-to-greet") == "World"
        assert metadata.input_default("message-prefix") == "Hello"
        assert metadata.input_default("include-time") == "false"
        assert metadata.input_default("github-token") is None

    def test_unknown_input(self):
        metadata = ActionMetadata({"inputs": {}})

        assert metadata.input_default("nope") is None

    def test_unquoted_boolean_default(self, tmp_path):
        path = tmp_path / "action.yml"
        path.write_text("name: x\ninputs:\n  flag:\n    default: true\n", encoding="utf-8")

        assert ActionMetadata.load(path).input_default("flag") == "true"

    def test_empty_sections(self, tmp_path):
        path = tmp_path / "action.yml"
        path.write_text("name: x\ninputs:\noutputs:\n", encoding="utf-8")

        metadata = ActionMetadata.load(path)

        assert metadata.inputs == {}
        assert metadata.declared_outputs == set()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read action metadata"):
            ActionMetadata.load(tmp_path / "action.yml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "action.yml"
        path.write_text("inputs: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ActionMetadata.load(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "action.yml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="not a mapping"):
            ActionMetadata.load(path)


class TestLoadMetadata:
    """Tests for load_metadata."""

    def test_found(self):
        metadata = load_metadata(REPO_ROOT)

        assert metadata is not None
        assert "message" in metadata.declared_outputs

    def test_missing_returns_none(self, tmp_path):
        assert load_metadata(tmp_path) is None
