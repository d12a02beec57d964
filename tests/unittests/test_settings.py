"""ABOUTME: Tests for the settings module.
ABOUTME: Verifies derived paths and environment overrides."""

from pathlib import Path

import pytest

from dexcore import __version__
from dexcore.logs import init_logging
from dexcore.settings import Settings, settings


class TestSettings:
    """Tests for Settings class."""

    def test_version(self) -> None:
        """Version matches the package version."""
        assert settings.VERSION == __version__

    def test_derived_paths(self, tmp_path: Path) -> None:
        """Config and export paths are derived from the project root."""
        custom = Settings(PROJECT_ROOT=tmp_path)

        assert custom.configs_dir == tmp_path / "configs"
        assert custom.logging_config_path == tmp_path / "configs" / "logging.yml"
        assert custom.exports_dir == tmp_path / "data" / "exports"

    def test_language_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The localized-name language can be set from the environment."""
        monkeypatch.setenv("FORM_NAME_LANGUAGE", "de")
        assert Settings().FORM_NAME_LANGUAGE == "de"


class TestInitLogging:
    """Tests for init_logging function."""

    def test_level_override(self, tmp_path: Path) -> None:
        """The level argument overrides the root level from the file."""
        config_path = tmp_path / "logging.yml"
        config_path.write_text("""
version: 1
disable_existing_loggers: false
root:
  level: WARNING
""")

        config = init_logging(config_path, level="DEBUG")

        assert config["root"]["level"] == "DEBUG"
