"""Application settings loaded from environment variables via pydantic-settings.

Values are read from (highest priority first):

  1. Environment variables, e.g. ``DATA_DIR=/srv/data``
  2. A ``.env`` file in the working directory
  3. The defaults below

Field ``releases_max_limit`` maps to ``RELEASES_MAX_LIMIT`` and so on.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """releaseBoard application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Data files ===
    # Relative paths resolve against the process working directory.
    data_dir: Path = Path("data")
    releases_file: str = "NewReleases.xlsx"
    config_path: str = "config/config.yaml"

    # === Query limits ===
    releases_default_limit: int = Field(default=100, ge=1)
    releases_max_limit: int = Field(default=1000, ge=1)
    stats_top_n: int = Field(default=5, ge=1)
    summary_cache_size: int = Field(default=8, ge=1)

    # === App Config ===
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    app_env: str = "development"
    log_level: str = "INFO"

    @property
    def releases_path(self) -> Path:
        return self.data_dir / self.releases_file
