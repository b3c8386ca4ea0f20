"""
Application settings and configuration using Pydantic BaseSettings.
"""
from typing import List, Optional
from pydantic import Field, validator
from pydantic_settings import BaseSettings
from enum import Enum


class Environment(str, Enum):
    """Application environment."""
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"


def _split_csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings(BaseSettings):
    """Application settings with environment-based configuration."""

    # Environment
    app_env: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment"
    )

    # Server settings
    port: int = Field(
        default=8090,
        description="Server port"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server host"
    )

    # Token engine
    languages: str = Field(
        default="en,es,de,fr",
        description="Comma-separated abbreviation languages, in rule priority order"
    )
    abbreviations_dir: Optional[str] = Field(
        default=None,
        description="Directory with <language>.json abbreviation files (bundled data if unset)"
    )
    abbreviation_cache_ttl: int = Field(
        default=3600,
        description="Abbreviation cache TTL in seconds"
    )

    # CORS settings
    cors_enabled: bool = Field(
        default=False,
        description="Enable CORS middleware"
    )
    allowed_origins: str = Field(
        default="http://localhost:5173,http://localhost:8090",
        description="Comma-separated allowed CORS origins"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    @validator("app_env", pre=True)
    def parse_app_env(cls, v):
        """Parse app environment, handle common variations."""
        if isinstance(v, str):
            v = v.lower()
            if v in ["dev", "development", "local"]:
                return Environment.DEVELOPMENT
            elif v in ["prod", "production"]:
                return Environment.PRODUCTION
            elif v in ["test", "testing"]:
                return Environment.TEST
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == Environment.PRODUCTION

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.app_env == Environment.TEST

    def get_languages(self) -> List[str]:
        """Configured languages, lowercased, duplicates removed, order kept."""
        seen: List[str] = []
        for language in _split_csv(self.languages):
            language = language.lower()
            if language not in seen:
                seen.append(language)
        return seen

    def get_allowed_origins(self) -> List[str]:
        return _split_csv(self.allowed_origins)

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

        # Use enum values in JSON
        use_enum_values = True


# Global settings instance - will be created by factory
settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def configure_settings(**overrides) -> Settings:
    """Configure settings with overrides (useful for testing)."""
    global settings
    settings = Settings(**overrides)
    return settings
