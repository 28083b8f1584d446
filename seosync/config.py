"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - site_url never ends with "/" (validator strips it)
    - Site overrides left unset fall back to the SiteConfig defaults
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Analytics disabled by default: works out-of-the-box without credentials
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from seosync.core.site_config import SiteConfig, with_overrides


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Site metadata overrides
    site_name: str | None = None
    site_url: str | None = None
    default_title: str | None = None
    default_description: str | None = None
    default_keywords: str | None = None
    default_image: str | None = None
    twitter_handle: str | None = None
    author: str | None = None
    language: str | None = None
    locale: str | None = None

    @field_validator("site_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        """Canonical paths are appended directly to site_url."""
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    # Analytics
    analytics_enabled: bool = False
    analytics_endpoint: str = "https://www.google-analytics.com/mp/collect"
    analytics_measurement_id: str = ""
    analytics_api_secret: str = ""
    analytics_timeout_seconds: float = 2.0

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def build_site_config(settings: Settings) -> SiteConfig:
    """SiteConfig defaults with any configured overrides applied."""
    return with_overrides(
        SiteConfig(),
        site_name=settings.site_name,
        site_url=settings.site_url,
        default_title=settings.default_title,
        default_description=settings.default_description,
        default_keywords=settings.default_keywords,
        default_image=settings.default_image,
        twitter_handle=settings.twitter_handle,
        author=settings.author,
        language=settings.language,
        locale=settings.locale,
    )
