"""
Meeting-minutes schemas.

Dependencies: pydantic
System role: Minutes drafting API contracts
"""

from enum import Enum

from pydantic import BaseModel, Field

from sales_coach.models.conversation import ConversationMessage


class MinutesSection(str, Enum):
    """Minutes sections that can be drafted from a conversation."""

    AGREEMENTS = "agreements"
    CONCERNS = "concerns"
    ACTION_ITEMS = "action_items"


class MinutesSummaryRequest(BaseModel):
    conversation: list[ConversationMessage] | None = None


class MinutesSummaryResponse(BaseModel):
    summary: str


class MinutesExtractRequest(BaseModel):
    conversation: list[ConversationMessage] | None = None
    section: MinutesSection | None = Field(default=None, description="Section to draft")


class MinutesExtractResponse(BaseModel):
    section: MinutesSection
    items: list[str]
