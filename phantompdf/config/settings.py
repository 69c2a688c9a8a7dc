"""
Application Settings
===================

Application settings and environment configuration using Pydantic Settings.
Supports development, testing, and production environments.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


class Settings(BaseSettings):
    """Main application settings with environment variable support."""

    # Application Configuration
    app_name: str = Field(default="PhantomJS PDF Generator", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Rasterizer Configuration
    phantom_root_folder: Optional[Path] = Field(
        default=None, description="Folder holding the PhantomJS executables and rasterize.js"
    )
    paper_size: str = Field(default="Letter", description="Default paper size")
    rasterize_script: str = Field(
        default="rasterize.js", description="Driver script passed to PhantomJS"
    )
    render_timeout: Optional[float] = Field(
        default=None, gt=0, description="Rasterizer timeout in seconds, unbounded when unset"
    )
    check_exit_status: bool = Field(
        default=False, description="Raise when the rasterizer exits with a non-zero status"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[Path] = Field(default=None, description="Optional rotating log file")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("paper_size", "rasterize_script")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject blank strings."""
        if not v.strip():
            raise ValueError("Value must not be blank")
        return v.strip()

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="PHANTOM_PDF_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
