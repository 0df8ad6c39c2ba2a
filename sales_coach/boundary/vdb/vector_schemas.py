"""
Vector database schemas.

Pydantic models for vector operations (upsert records, query matches)
and the adapter protocol both backends implement.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field

TEXT_METADATA_KEY = "text"
SOURCE_METADATA_KEY = "source"


class VectorRecord(BaseModel):
    """Single record for upsert."""

    id: str = Field(description="Record key, unique within the index")
    text: str = Field(description="Chunk text stored as metadata")
    source: str = Field(description="Source label stored as metadata")
    embedding: list[float] = Field(description="Embedding vector")

    def metadata(self) -> dict[str, str]:
        return {TEXT_METADATA_KEY: self.text, SOURCE_METADATA_KEY: self.source}


class VectorMatch(BaseModel):
    """Single result from a nearest-neighbor query."""

    id: str = Field(description="Record key")
    score: float | None = Field(default=None, description="Backend-specific distance or similarity")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Stored metadata, may be incomplete")


@runtime_checkable
class KnowledgeVectorStore(Protocol):
    """Operations the knowledge pipeline needs from a vector store.

    Both methods are synchronous and may block on network I/O; callers
    dispatch them to a worker thread.
    """

    def upsert(self, records: list[VectorRecord]) -> None:
        """Insert or overwrite records by id."""
        ...

    def query(self, embedding: list[float], top_k: int) -> list[VectorMatch]:
        """Return up to top_k nearest records with metadata."""
        ...
