"""
Coaching suggestion schemas.

Dependencies: pydantic
System role: Coaching API contracts
"""

from pydantic import BaseModel, Field

from sales_coach.models.conversation import ConversationMessage


class CoachingRequest(BaseModel):
    """Request schema for coaching suggestions."""

    conversation: list[ConversationMessage] | None = Field(
        default=None,
        description="Conversation turns in insertion order",
    )


class CoachingResponse(BaseModel):
    """Raw suggestion strings split from the model output."""

    suggestions: list[str]


class CoachingSuggestionSet(BaseModel):
    """Suggestions bucketed into the three coaching categories."""

    questions: list[str] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)

    def all_items(self) -> list[str]:
        return [*self.questions, *self.next_steps, *self.tips]
