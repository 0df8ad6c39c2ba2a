"""
Top-level Settings.

Groups the provider, vector store, server and knowledge settings under
one object that create_app() and SalesCoachAgent receive.

Dependencies: sales_coach.configs submodules
System role: Configuration entry point
"""

from functools import lru_cache

from pydantic import Field

from sales_coach.configs.base import BaseSettings
from sales_coach.configs.knowledge import KnowledgeSettings
from sales_coach.configs.llm import EmbeddingSettings, LLMSettings
from sales_coach.configs.server import ServerSettings
from sales_coach.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """All service settings."""

    llm: LLMSettings = Field(default_factory=LLMSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    knowledge: KnowledgeSettings = Field(default_factory=KnowledgeSettings)

    @property
    def embedding_api_key(self) -> str | None:
        """Embedding credential, falling back to the LLM credential."""
        return self.embedding.api_key or self.llm.api_key


@lru_cache
def get_settings() -> Settings:
    """Process-wide Settings, read from the environment on first call."""
    return Settings()
