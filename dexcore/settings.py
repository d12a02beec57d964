"""ABOUTME: Configuration logic and path settings for the project.
ABOUTME: Provides paths for configs and exports plus the localized-name language."""

from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings

from dexcore import __version__


def _get_project_root() -> Path:
    """Find project root by looking for pyproject.toml."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Contains settings for this project."""

    VERSION: str = __version__
    """Project version."""

    PROJECT_ROOT: Path = _get_project_root()
    """Root directory of the project."""

    FORM_NAME_LANGUAGE: str = "en"
    """Language code used to pick localized form names from upstream payloads."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def configs_dir(self) -> Path:
        """Directory containing configuration files."""
        return self.PROJECT_ROOT / "configs"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logging_config_path(self) -> Path:
        """Path to the logging.yml configuration file."""
        return self.configs_dir / "logging.yml"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def data_dir(self) -> Path:
        """Base data directory."""
        return self.PROJECT_ROOT / "data"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def exports_dir(self) -> Path:
        """Default directory for exported type chart tables."""
        return self.data_dir / "exports"


settings = Settings()
