"""
Conversation domain models.

A conversation is an ordered list of speaker turns captured by the client.

Dependencies: pydantic
System role: Conversation transcript contracts
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

_SPEAKER_ALIASES = {
    "assistant": "ai",
    "error": "system-error",
    "system_error": "system-error",
}


class Speaker(str, Enum):
    """Who produced a conversation turn."""

    USER = "user"
    AI = "ai"
    SYSTEM_ERROR = "system-error"


class ConversationMessage(BaseModel):
    """Single immutable conversation turn."""

    model_config = ConfigDict(frozen=True)

    speaker: Speaker = Field(description="Turn author: user, ai or system-error")
    text: str = Field(description="Turn content")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the turn was captured",
    )

    @field_validator("speaker", mode="before")
    @classmethod
    def normalize_speaker(cls, value):
        """Accept the frontend spellings ("AI", "Error") for speakers."""
        if isinstance(value, str):
            lowered = value.strip().lower()
            return _SPEAKER_ALIASES.get(lowered, lowered)
        return value

    def render(self) -> str:
        """Render as a transcript line."""
        return f"{self.speaker.value}: {self.text}"


def render_transcript(conversation: list[ConversationMessage]) -> str:
    """Join conversation turns as "{speaker}: {text}" lines separated by blank lines."""
    return "\n\n".join(message.render() for message in conversation)
