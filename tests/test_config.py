# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Tests for configuration module.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

import hello_world_action.config  # Needed to access module-level _config_instance
from hello_world_action.config import Config, get_config
from hello_world_action.exceptions import ConfigurationError


class TestConfigRunnerFiles:
    """Tests for runner file paths."""

    def test_paths_loaded(self, tmp_path):
        env = {
            "GITHUB_OUTPUT": str(tmp_path / "output"),
            "GITHUB_STEP_SUMMARY": str(tmp_path / "summary"),
        }

        config = Config(env=env)

        assert config.GITHUB_OUTPUT == tmp_path / "output"
        assert config.GITHUB_STEP_SUMMARY == tmp_path / "summary"

    def test_local_run_without_runner_files(self):
        config = Config(env={})

        assert config.GITHUB_OUTPUT is None
        assert config.GITHUB_STEP_SUMMARY is None

    def test_empty_values_are_none(self):
        config = Config(env={"GITHUB_OUTPUT": "", "GITHUB_STEP_SUMMARY": ""})

        assert config.GITHUB_OUTPUT is None
        assert config.GITHUB_STEP_SUMMARY is None

    @pytest.mark.parametrize("name", ["GITHUB_OUTPUT", "GITHUB_STEP_SUMMARY"])
    @pytest.mark.parametrize("bad", ["/tmp/out\n", "/tmp/\x00out", "/tmp/out\r"])
    def test_dangerous_characters(self, name, bad):
        with pytest.raises(ConfigurationError, match=f"Invalid {name}"):
            Config(env={name: bad})

    def test_action_path(self, tmp_path):
        config = Config(env={"GITHUB_ACTION_PATH": str(tmp_path)})

        assert config.ACTION_PATH == tmp_path

    def test_action_path_defaults_to_repository_root(self):
        config = Config(env={})

        assert (config.ACTION_PATH / "action.yml").is_file()


class TestConfigDebugMode:
    """Tests for debug mode detection."""

    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes"])
    def test_debug_mode_enabled(self, value):
        assert Config(env={"DEBUG_MODE": value}).DEBUG_MODE is True

    @pytest.mark.parametrize("value", ["false", "0", "no", ""])
    def test_debug_mode_disabled(self, value):
        assert Config(env={"DEBUG_MODE": value}).DEBUG_MODE is False

    def test_runner_debug(self):
        assert Config(env={"RUNNER_DEBUG": "1"}).DEBUG_MODE is True

    def test_default(self):
        assert Config(env={}).DEBUG_MODE is False


class TestGetConfig:
    """Tests for the global config instance."""

    @pytest.fixture(autouse=True)
    def reset_config(self):
        """Reset global config instance before each test."""
        hello_world_action.config._config_instance = None
        yield
        hello_world_action.config._config_instance = None

    def test_singleton(self, tmp_path):
        with patch.dict(os.environ, {"GITHUB_OUTPUT": str(tmp_path / "output")}, clear=True):
            first = get_config()
            second = get_config()

        assert first is second
        assert first.GITHUB_OUTPUT == Path(tmp_path / "output")

    def test_reads_os_environ(self):
        with patch.dict(os.environ, {"DEBUG_MODE": "true"}, clear=True):
            assert get_config().DEBUG_MODE is True
