"""
Answer generation.

Renders the grounded prompt and calls the chat model exactly once.

Dependencies: langchain_core.language_models, sales_coach.core.agent.answer_prompt
System role: LLM call for question answering
"""

import logging

from langchain_core.language_models import BaseChatModel

from sales_coach.core.agent.answer_prompt import ANSWER_PROMPT, format_context
from sales_coach.core.exceptions import GenerationError
from sales_coach.models.retrieval import RetrievedDocument

logger = logging.getLogger(__name__)


def content_to_text(content) -> str:
    """Flatten string or content-block list message content to plain text."""
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content)


class AnswerGenerator:
    """Chat model wrapper producing verbatim answer text."""

    def __init__(self, model: BaseChatModel) -> None:
        self._model = model

    async def generate(self, question: str, documents: list[RetrievedDocument]) -> str:
        """
        Generate an answer grounded on the given documents.

        Args:
            question: User question (passed verbatim)
            documents: Context documents, may be empty

        Returns:
            str: Model output text, unmodified

        Raises:
            GenerationError: Model call failed
        """
        messages = ANSWER_PROMPT.invoke({
            "context": format_context(documents),
            "question": question,
        }).to_messages()

        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            logger.error(f"{__name__}:generate - Model call FAILED: {type(e).__name__}: {e}")
            raise GenerationError(str(e), code=type(e).__name__) from e

        answer = content_to_text(response.content)
        logger.info(f"{__name__}:generate - END answer_len={len(answer)}, context_docs={len(documents)}")
        return answer
