"""
Configuration

Application settings and environment configuration for localized-settings.
"""

from typing import List, Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration settings.

    Supports both environment variables and .env file loading.
    Environment variables take precedence over .env file values.
    """

    # Application settings
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(
        default="info", description="Log level (debug, info, warning, error)"
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Application environment"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate log level."""
        allowed_levels = {"debug", "info", "warning", "error"}
        normalized = v.lower().strip()
        if normalized not in allowed_levels:
            raise ValueError(
                f"log_level must be one of {sorted(allowed_levels)}, got '{v}'"
            )
        return normalized

    # API settings
    api__title: str = Field(default="localized-settings", description="API title")
    api__description: str = Field(
        default="Localized key-value settings service", description="API description"
    )
    api__version: str = Field(default="1.0.0", description="API version")
    api__docs_url: str = Field(default="/docs", description="API documentation URL")
    api__redoc_url: str = Field(default="/redoc", description="ReDoc documentation URL")

    # CORS settings
    cors__allow_origins: str = Field(
        default="*", description="Allowed origins for CORS (comma-separated)"
    )
    cors__allow_credentials: bool = Field(
        default=False, description="Allow credentials in CORS"
    )
    cors__allow_methods: str = Field(
        default="GET,PUT,DELETE",
        description="Allowed HTTP methods (comma-separated)",
    )
    cors__allow_headers: str = Field(
        default="*", description="Allowed headers (comma-separated)"
    )

    # Database settings
    database__url: str = Field(
        default="sqlite:///./settings.db",
        description="Database connection URL",
    )
    database__echo: bool = Field(default=False, description="Enable SQL query logging")
    database__pool_size: int = Field(
        default=5, ge=1, description="Connection pool size"
    )
    database__max_overflow: int = Field(
        default=10, ge=0, description="Maximum overflow connections"
    )
    database__pool_timeout: int = Field(
        default=30, ge=0, description="Pool timeout in seconds"
    )
    database__pool_recycle: int = Field(
        default=3600, ge=0, description="Pool recycle time in seconds"
    )
    database__pool_pre_ping: bool = Field(
        default=True, description="Enable pool pre-ping"
    )

    # Locale settings
    locale__default_language: str = Field(
        default="en", description="Language used when no active language is set"
    )
    locale__supported_languages: str = Field(
        default="en,ar",
        description="Languages accepted from requests (comma-separated)",
    )

    @field_validator("locale__default_language")
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        """Normalize the default language code."""
        normalized = v.lower().strip()
        if not normalized:
            raise ValueError("locale__default_language cannot be empty")
        return normalized

    # Health check configuration
    health__check_database: bool = Field(
        default=False, description="Enable database health check"
    )

    # Logfire monitoring settings
    logfire__enabled: bool = Field(
        default=False, description="Enable Logfire monitoring"
    )
    logfire__service_name: str = Field(
        default="localized_settings", description="Logfire service name"
    )
    logfire__environment: str = Field(
        default="development", description="Logfire environment"
    )
    logfire__token: Optional[SecretStr] = Field(
        default=None, description="Logfire token"
    )
    logfire__instrument__sqlalchemy: bool = Field(
        default=True, description="Enable Logfire SQLAlchemy instrumentation"
    )
    logfire__instrument__fastapi: bool = Field(
        default=True, description="Enable Logfire FastAPI instrumentation"
    )

    # Logging file settings (optional)
    log__dir: str = Field(
        default="logs", description="Directory where log files are stored"
    )
    log__file_path: Optional[str] = Field(
        default=None, description="Custom log file path; overrides log__dir if set"
    )
    log__file_level: str = Field(default="INFO", description="File handler log level")
    log__file_max_bytes: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Max size of a log file before rotation",
    )
    log__file_backup_count: int = Field(
        default=3, ge=0, description="Number of backup log files to keep"
    )

    # Properties for list conversion
    @property
    def cors_allow_origins_list(self) -> List[str]:
        """Convert comma-separated origins to list."""
        return [origin.strip() for origin in str(self.cors__allow_origins).split(",")]

    @property
    def cors_allow_methods_list(self) -> List[str]:
        """Convert comma-separated methods to list."""
        return [method.strip() for method in str(self.cors__allow_methods).split(",")]

    @property
    def cors_allow_headers_list(self) -> List[str]:
        """Convert comma-separated headers to list."""
        return [header.strip() for header in str(self.cors__allow_headers).split(",")]

    @property
    def supported_languages_list(self) -> List[str]:
        """Convert comma-separated languages to a lowercase list."""
        return [
            lang.strip().lower()
            for lang in str(self.locale__supported_languages).split(",")
            if lang.strip()
        ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )


def create_settings() -> Settings:
    """
    Create and validate settings instance.

    Returns:
        Settings: Configured settings instance

    Raises:
        RuntimeError: If configuration validation fails
    """
    try:
        return Settings()
    except Exception as e:
        print(f"❌ Configuration loading failed: {e}")
        print("Please check your environment variables and .env file")
        raise RuntimeError(f"Configuration loading failed: {e}") from e


# Global configuration instance
settings = create_settings()
