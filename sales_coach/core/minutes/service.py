"""
Minutes service.

Drafts meeting minutes from a conversation: a running summary of what
the user side said, and itemised sections (agreements, open concerns,
action items) extracted by the model.

Dependencies: sales_coach.core.agent
System role: Business logic behind the /minutes endpoints
"""

import logging
import re

from sales_coach.core.agent import SalesCoachAgent
from sales_coach.core.exceptions import EmptyConversationError
from sales_coach.core.minutes.prompts import (
    build_section_prompt,
    build_summary_chunk_prompt,
    build_summary_merge_prompt,
)
from sales_coach.models.conversation import ConversationMessage, Speaker, render_transcript
from sales_coach.models.minutes import MinutesSection

logger = logging.getLogger(__name__)

SUMMARY_CHUNK_SIZE = 5
NO_USER_MESSAGES = "要約するメッセージがありません。"

_LIST_MARKER_PATTERN = re.compile(r"^(?:[-・*•]|\d+[.)])\s*")


def parse_list_items(text: str) -> list[str]:
    """Split model output into lines, stripping bullets and numbering."""
    items = []
    for line in text.splitlines():
        item = _LIST_MARKER_PATTERN.sub("", line.strip()).strip()
        if item:
            items.append(item)
    return items


class MinutesService:
    """Draft meeting minutes through the agent."""

    def __init__(self, agent: SalesCoachAgent) -> None:
        self._agent = agent

    async def summarize(self, conversation: list[ConversationMessage] | None) -> str:
        """
        Summarise the user side of a conversation.

        User messages are summarised in groups of five; several partial
        summaries are merged with one final call.

        Raises:
            EmptyConversationError: Conversation empty or without user messages
        """
        if not conversation:
            raise EmptyConversationError()

        user_texts = [message.text for message in conversation if message.speaker is Speaker.USER]
        if not user_texts:
            raise EmptyConversationError(NO_USER_MESSAGES)

        summaries = []
        for start in range(0, len(user_texts), SUMMARY_CHUNK_SIZE):
            chunk = user_texts[start:start + SUMMARY_CHUNK_SIZE]
            summaries.append(await self._agent.ask(build_summary_chunk_prompt(chunk)))

        logger.info(f"{__name__}:summarize - Summarised {len(user_texts)} messages in {len(summaries)} chunks")
        if len(summaries) == 1:
            return summaries[0]
        return await self._agent.ask(build_summary_merge_prompt(summaries))

    async def extract_section(
        self,
        conversation: list[ConversationMessage] | None,
        section: MinutesSection,
    ) -> list[str]:
        """
        Extract one minutes section as a list of items.

        Args:
            conversation: Conversation turns
            section: Section to draft

        Raises:
            EmptyConversationError: Conversation missing or empty
        """
        if not conversation:
            raise EmptyConversationError()

        answer = await self._agent.ask(build_section_prompt(section, render_transcript(conversation)))
        items = parse_list_items(answer)
        logger.info(f"{__name__}:extract_section - section={section.value}, items={len(items)}")
        return items
