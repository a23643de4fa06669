"""Application configuration — loaded from environment variables."""

from __future__ import annotations

import tempfile
from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_picker.domain.value_objects import ListingFeatures


class Settings(BaseSettings):
    """Central configuration loaded from ``GITHUB_PICKER_*`` env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_PICKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base: str = "https://api.github.com"
    github_token: SecretStr | None = None
    request_timeout: float = 30.0
    max_redirects: int = 3
    include_branches: bool = True
    include_meta_folders: bool = True
    validate_login: bool = True
    staging_dir: Path = Path(tempfile.gettempdir()) / "github-picker"
    icon_base_url: str = "/pix/f"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def features(self) -> ListingFeatures:
        return ListingFeatures(
            include_branches=self.include_branches,
            include_meta_folders=self.include_meta_folders,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
