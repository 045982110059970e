"""
Core configuration module using Pydantic Settings.

This module defines all application settings loaded from environment variables.
Every setting has a default so the mapper can be imported without a .env file.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are loaded from .env file or environment variables.
    Settings are validated using Pydantic with type hints.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(default="orgmapper")
    version: str = Field(default="0.1.0")
    environment: Literal["development", "staging", "production"] = Field(default="development")

    # -------------------------------------------------------------------------
    # Mapping Settings
    # -------------------------------------------------------------------------
    department_organization_suffix: str = Field(
        default="_DEPT",
        description="Suffix appended by the department after-mapping hook",
    )
    employee_name_separator: str = Field(
        default="",
        description="Separator placed between first and last name in name projections",
    )
    trace_hooks: bool = Field(
        default=True,
        description="Log the in-progress target from enrichment hooks at DEBUG level",
    )

    # -------------------------------------------------------------------------
    # Logging Configuration
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")
    log_file_enabled: bool = Field(default=False)
    log_file_path: str = Field(default="logs/orgmapper.log")
    log_file_max_bytes: int = Field(default=10485760)  # 10 MB
    log_file_backup_count: int = Field(default=5)

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


# Singleton instance of settings
# Import this instance throughout the application
settings = Settings()
