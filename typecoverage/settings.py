"""ABOUTME: Configuration logic and path settings for the project.
ABOUTME: Provides analysis defaults and paths for configs and the logging setup."""

from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from typecoverage import __version__


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

    model_config = SettingsConfigDict(env_prefix="TYPECOVERAGE_")

    VERSION: str = __version__
    """Project version."""

    PROJECT_ROOT: Path = _get_project_root()
    """Root directory of the project."""

    INCLUDE_COMBOS: bool = False
    """Recommend pairs of types in addition to single types."""

    STRICT_SHARED_WEAKNESSES: bool = False
    """Reject candidates that share any weakness with any roster member."""

    TYPE_CHART_PATH: Path | None = None
    """Optional YAML file replacing the built-in type chart."""

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


settings = Settings()
