"""
Coaching service.

Turns a conversation transcript into a list of coaching suggestions by
sending the coaching prompt through the agent.

Dependencies: sales_coach.core.agent, sales_coach.core.coaching
System role: Business logic behind POST /coaching
"""

import logging

from sales_coach.core.agent import SalesCoachAgent
from sales_coach.core.coaching.categorizer import categorize_suggestions
from sales_coach.core.coaching.parser import split_numbered_suggestions
from sales_coach.core.coaching.prompts import build_coaching_prompt
from sales_coach.core.exceptions import EmptyConversationError
from sales_coach.models.coaching import CoachingSuggestionSet
from sales_coach.models.conversation import ConversationMessage, render_transcript

logger = logging.getLogger(__name__)


class CoachingService:
    """Generate coaching suggestions for a conversation."""

    def __init__(self, agent: SalesCoachAgent) -> None:
        self._agent = agent

    async def generate_suggestions(self, conversation: list[ConversationMessage] | None) -> list[str]:
        """
        Generate flat suggestion strings.

        Args:
            conversation: Conversation turns in order

        Returns:
            list[str]: Suggestions split on numbered markers

        Raises:
            EmptyConversationError: Conversation missing or empty
        """
        if not conversation:
            raise EmptyConversationError()

        logger.info(f"{__name__}:generate_suggestions - START messages={len(conversation)}")
        prompt = build_coaching_prompt(render_transcript(conversation))
        answer = await self._agent.ask(prompt)

        suggestions = split_numbered_suggestions(answer)
        logger.info(f"{__name__}:generate_suggestions - END suggestions={len(suggestions)}")
        return suggestions

    async def suggest(self, conversation: list[ConversationMessage] | None) -> CoachingSuggestionSet:
        """Generate suggestions and bucket them by category."""
        return categorize_suggestions(await self.generate_suggestions(conversation))
