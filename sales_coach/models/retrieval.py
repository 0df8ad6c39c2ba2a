"""
Retrieval result models.

Distinguishes "no matches found" from "provider call failed" so the
answer-anyway behavior stays observable.

Dependencies: pydantic
System role: Retriever output contracts
"""

from enum import Enum

from pydantic import BaseModel, Field


class RetrievalStatus(str, Enum):
    """Outcome of a context fetch."""

    GROUNDED = "grounded"
    NO_MATCHES = "no_matches"
    DEGRADED = "degraded"


class RetrievedDocument(BaseModel):
    """Context document derived from a similarity match."""

    text: str
    source_label: str


class RetrievalResult(BaseModel):
    """Context documents plus how they were obtained."""

    status: RetrievalStatus
    documents: list[RetrievedDocument] = Field(default_factory=list)
    error: str | None = Field(default=None, description="Provider failure message when degraded")

    @property
    def is_degraded(self) -> bool:
        """True when the store or embedding provider failed."""
        return self.status is RetrievalStatus.DEGRADED

    @classmethod
    def from_documents(cls, documents: list[RetrievedDocument]) -> "RetrievalResult":
        status = RetrievalStatus.GROUNDED if documents else RetrievalStatus.NO_MATCHES
        return cls(status=status, documents=documents)

    @classmethod
    def degraded(cls, error: Exception) -> "RetrievalResult":
        return cls(status=RetrievalStatus.DEGRADED, documents=[], error=str(error))
