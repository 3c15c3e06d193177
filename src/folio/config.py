"""Configuration management using pydantic-settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ThemeName = Literal["light", "dark"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables (``FOLIO_*``)."""

    model_config = SettingsConfigDict(
        env_prefix="FOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Data document: http(s) URL or a path relative to site_root
    data_location: str = "data/portfolio.json"
    site_root: Path = Path(".")
    site_url: str = ""  # e.g. https://example.com, used for SEO tags

    # Shell template; empty = packaged templates/index.html
    shell_path: Path | None = None
    output_path: Path = Path("dist/index.html")

    # Data loading
    fetch_max_attempts: int = 3
    fetch_base_delay: float = 1.0  # seconds, doubled per failed attempt
    http_timeout: float = 10.0

    # Persisted browser state
    storage_path: Path | None = None  # None = in-memory local storage
    theme_storage_key: str = "portfolio-theme"
    default_theme: ThemeName = "dark"

    # Interaction timings (milliseconds)
    search_debounce_ms: int = 300
    achievement_stagger_ms: int = 100
    reveal_stagger_ms: int = 150
    announce_delay_ms: int = 100

    # Viewport / performance
    viewport_height: int = 900
    lazy_load_margin: int = 100  # px before entering the viewport
    reveal_margin: int = 50
    reduced_motion: bool = False
    webp_supported: bool = False

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Path | None = None

    @property
    def is_remote_data(self) -> bool:
        """Check if the data document is fetched over HTTP."""
        return self.data_location.startswith(("http://", "https://"))

    @property
    def data_path(self) -> Path:
        """Get the local data document path (only meaningful for local data)."""
        return self.site_root / self.data_location


# Global settings instance
settings = Settings()
