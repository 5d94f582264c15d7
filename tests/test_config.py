# SPDX-License-Identifier: MIT
"""Tests for CLI configuration."""

import pytest

from semver_core.config import CLIConfig


class TestCLIConfig:
    """Tests for CLIConfig.from_env."""

    def test_defaults(self):
        """Test defaults with an empty environment."""
        config = CLIConfig.from_env({})
        assert config.verbose is False
        assert config.color is True

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on", " True "])
    def test_verbose_true(self, value):
        """Test truthy SEMVER_VERBOSE values."""
        assert CLIConfig.from_env({"SEMVER_VERBOSE": value}).verbose is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", "maybe"])
    def test_verbose_false(self, value):
        """Test non-truthy SEMVER_VERBOSE values."""
        assert CLIConfig.from_env({"SEMVER_VERBOSE": value}).verbose is False

    def test_empty_value_keeps_default(self):
        """Test that an empty variable is treated as unset."""
        assert CLIConfig.from_env({"SEMVER_VERBOSE": ""}).verbose is False

    def test_no_color(self):
        """Test that NO_COLOR disables colour."""
        assert CLIConfig.from_env({"NO_COLOR": "1"}).color is False

    def test_empty_no_color_ignored(self):
        """Test that an empty NO_COLOR does not disable colour."""
        assert CLIConfig.from_env({"NO_COLOR": ""}).color is True

    def test_semver_color_wins_over_no_color(self):
        """Test that SEMVER_COLOR takes priority over NO_COLOR."""
        assert CLIConfig.from_env({"SEMVER_COLOR": "true", "NO_COLOR": "1"}).color is True
        assert CLIConfig.from_env({"SEMVER_COLOR": "false"}).color is False

    def test_reads_os_environ(self, clean_env, monkeypatch):
        """Test that from_env() without arguments reads os.environ."""
        monkeypatch.setenv("SEMVER_VERBOSE", "yes")
        monkeypatch.setenv("NO_COLOR", "1")
        config = CLIConfig.from_env()
        assert config.verbose is True
        assert config.color is False
