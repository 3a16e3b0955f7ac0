"""Application configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults for development.

    Environment Variables:
        DEALER_ASSIGNMENT_ATTRIBUTE_KEY: Cart attribute holding the assignment blob
        REQUIRE_DEALER_ASSIGNMENT: Block checkout when no assignment is attached
        CORS_ORIGINS: Comma-separated list of allowed origins
        DEBUG: Enable debug mode (default False)
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default True)
    """

    # Validation policy
    DEALER_ASSIGNMENT_ATTRIBUTE_KEY: str = "dealer_assignment_data"
    REQUIRE_DEALER_ASSIGNMENT: bool = False

    # HTTP
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8080"

    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
    ENVIRONMENT: str = "development"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache for singleton behavior.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
