"""Tests for environment-based settings."""

import os

import pytest

from repostats.config import DEFAULT_OUTPUT_FILE, Settings


class TestSettingsFromEnv:
    """Test Settings.from_env."""

    def test_defaults(self, clean_env):
        settings = Settings.from_env()
        assert settings.token is None
        assert settings.max_repos is None
        assert settings.show_progress is True
        assert settings.delay == 0.5
        assert settings.output_file == DEFAULT_OUTPUT_FILE
        assert settings.registry_path == os.path.expanduser(
            os.path.join("~", ".julia", "registries", "General")
        )

    def test_overrides(self, clean_env):
        clean_env.setenv("GITHUB_TOKEN", "secret")
        clean_env.setenv("REGISTRY_PATH", "/tmp/General")
        clean_env.setenv("MAX_REPOS", "25")
        clean_env.setenv("SHOW_PROGRESS", "false")
        clean_env.setenv("REQUEST_DELAY", "0")
        clean_env.setenv("OUTPUT_FILE", "stats.csv")

        settings = Settings.from_env()
        assert settings.token == "secret"
        assert settings.registry_path == "/tmp/General"
        assert settings.max_repos == 25
        assert settings.show_progress is False
        assert settings.delay == 0.0
        assert settings.output_file == "stats.csv"

    @pytest.mark.parametrize("name,value", [("MAX_REPOS", "ten"), ("REQUEST_DELAY", "soon")])
    def test_invalid_numbers(self, clean_env, name, value):
        """Test that bad numeric values name the variable."""
        clean_env.setenv(name, value)
        with pytest.raises(ValueError, match=name):
            Settings.from_env()

    def test_token_not_in_repr(self, clean_env):
        """Test that the token never appears in the settings repr."""
        clean_env.setenv("GITHUB_TOKEN", "ghp_supersecret")
        assert "ghp_supersecret" not in repr(Settings.from_env())
