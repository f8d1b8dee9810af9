"""Configuration management for the project."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Permutation cache
    permutation_cache_size: int = Field(default=32, env="PERMUTATION_CACHE_SIZE")

    # Search
    search_default_limit: int = Field(default=25, env="SEARCH_DEFAULT_LIMIT")
    search_max_results: int = Field(default=50, env="SEARCH_MAX_RESULTS")

    # Data quality
    min_catalog_size: int = Field(default=200, env="MIN_CATALOG_SIZE")

    # Logging
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    log_format: str = Field(default="json", env="LOG_FORMAT")

    class Config:
        """Pydantic config."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


settings = Settings()
