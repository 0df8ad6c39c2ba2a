"""Question answering API endpoint.

Routes:
- POST /ask - Answer a question grounded on the knowledge base

Dependencies: sales_coach.core.agent
System role: Q&A HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from sales_coach.api.deps import get_agent
from sales_coach.api.error_handling import handle_api_errors
from sales_coach.core.agent import SalesCoachAgent
from sales_coach.core.exceptions import ValidationError
from sales_coach.models.chat import AskRequest, AskResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ask"])

MISSING_QUESTION = "Missing 'question' in request body"


@router.post("/ask", response_model=AskResponse)
@handle_api_errors
async def ask(
    request: AskRequest | None = None,
    agent: SalesCoachAgent = Depends(get_agent),
) -> AskResponse:
    """Answer a question.

    The answer is returned even when retrieval found nothing or failed;
    "grounding" tells the caller which case applied.

    Raises:
        ApiError(400): Question missing or empty
        ApiError(500): Pipeline build or model failure
    """
    if request is None or not request.question:
        raise ValidationError(MISSING_QUESTION, field="question")

    answer = await agent.ask_with_context(request.question)
    return AskResponse(answer=answer.text, grounding=answer.grounding)
