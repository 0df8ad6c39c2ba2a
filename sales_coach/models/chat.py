"""
Question answering schemas.

Request/response schemas for the /ask endpoint.

Dependencies: pydantic
System role: Ask API contracts
"""

from pydantic import BaseModel, Field

from sales_coach.models.retrieval import RetrievalStatus


class AskRequest(BaseModel):
    """Request schema for a single question."""

    question: str | None = Field(default=None, description="User question")


class AskResponse(BaseModel):
    """Response schema for a generated answer."""

    answer: str
    grounding: RetrievalStatus = Field(
        description="Whether the answer used retrieved knowledge, found none, or retrieval failed",
    )


class AgentAnswer(BaseModel):
    """Generated answer with its grounding signal."""

    text: str
    grounding: RetrievalStatus
    sources: list[str] = Field(default_factory=list)
