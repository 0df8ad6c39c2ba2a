"""
Shared settings base.

Every settings class reads the process environment and an optional .env
file. The fields here apply to the whole service.

Dependencies: pydantic, pydantic_settings
System role: Root of the configuration tree
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Service-wide settings: deployment environment, diagnostics, log level."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(default="development", description="Deployment environment name")
    debug: bool = Field(
        default=False,
        description="Verbose diagnostics: 500 responses include the stack trace",
    )
    log_level: str = Field(default="INFO", description="Root log level name")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"
