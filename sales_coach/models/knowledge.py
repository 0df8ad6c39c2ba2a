"""
Knowledge base domain models and schemas.

Dependencies: pydantic
System role: Knowledge ingestion contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class KnowledgeChunk(BaseModel):
    """One embedded paragraph of knowledge, immutable once stored."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique chunk identifier")
    text: str = Field(min_length=1, description="Chunk text")
    source_label: str = Field(description="Where the chunk came from")
    embedding: list[float] = Field(description="Embedding vector")


class IngestionResult(BaseModel):
    """Outcome of an ingestion call."""

    accepted_count: int = Field(ge=0)
    chunk_ids: list[str] = Field(default_factory=list)


class KnowledgeAddRequest(BaseModel):
    """Request schema for adding raw text to the knowledge base."""

    text: str | None = Field(default=None, description="Raw text, paragraphs separated by blank lines")
    source: str | None = Field(default=None, description="Optional source label")


class KnowledgeIngestResponse(BaseModel):
    """Response schema for knowledge ingestion endpoints."""

    success: bool = True
    message: str
