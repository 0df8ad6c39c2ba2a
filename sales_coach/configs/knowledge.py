"""
Knowledge base settings.

Dependencies: pydantic_settings
System role: Ingestion batch size and optional seed content
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class KnowledgeSettings(BaseSettings):
    """Knowledge ingestion configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KNOWLEDGE_",
        case_sensitive=False,
        extra="ignore",
    )

    seed_file: str | None = Field(
        default=None,
        description="Plain-text file ingested once when the pipeline is built",
    )
    batch_size: int = Field(
        default=100,
        description="Records per vector store upsert call",
    )
