"""
Language model and embedding provider settings.

Credentials for the hosted Gemini chat model and embedding model.
The embedding key falls back to the LLM key when unset, since both
are usually the same Google API credential.

Dependencies: pydantic, pydantic_settings
System role: Provider credential and model configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Chat model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LLM_API_KEY", "GOOGLE_API_KEY"),
        description="API key for the hosted chat model",
    )
    model: str = Field(default="gemini-2.5-flash", description="Chat model identifier")
    temperature: float = Field(
        default=0.0,
        description="Sampling temperature (0.0 for reproducible answers)",
    )


class EmbeddingSettings(BaseSettings):
    """Embedding model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="API key for the embedding model (defaults to the LLM key)",
    )
    model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID",
    )
    dimension: int = Field(
        default=1024,
        description="Fixed embedding vector dimension for every stored chunk",
    )
