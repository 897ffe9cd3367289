"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from biows.constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    FIVEFILTERS_BASE_URL,
    GBIF_BASE_URL,
    NCBI_BASE_URL,
    PUBMED_BASE_URL,
    WIKIPEDIA_MEDIA_URL,
    WIKIPEDIA_REDIRECT_URL,
    WIKIPEDIA_SUMMARY_URL,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables (prefix ``BIOWS_``)."""

    # Provider endpoints
    gbif_url: str = GBIF_BASE_URL
    ncbi_url: str = NCBI_BASE_URL
    wikipedia_summary_url: str = WIKIPEDIA_SUMMARY_URL
    wikipedia_media_url: str = WIKIPEDIA_MEDIA_URL
    wikipedia_redirect_url: str = WIKIPEDIA_REDIRECT_URL
    fivefilters_url: str = FIVEFILTERS_BASE_URL
    pubmed_url: str = PUBMED_BASE_URL

    # Transport
    timeout_seconds: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    # App Settings
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_prefix = "BIOWS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
