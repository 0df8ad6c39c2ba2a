"""Coaching API endpoint.

Routes:
- POST /coaching - Suggest questions, next steps and tips for a conversation

Dependencies: sales_coach.core.coaching
System role: Coaching HTTP API
"""

from fastapi import APIRouter, Depends

from sales_coach.api.deps import get_coaching_service
from sales_coach.api.error_handling import handle_api_errors
from sales_coach.core.coaching import CoachingService
from sales_coach.models.coaching import CoachingRequest, CoachingResponse

router = APIRouter(tags=["coaching"])


@router.post("/coaching", response_model=CoachingResponse)
@handle_api_errors
async def coaching(
    request: CoachingRequest | None = None,
    coaching_service: CoachingService = Depends(get_coaching_service),
) -> CoachingResponse:
    """Generate coaching suggestions for the conversation so far."""
    conversation = request.conversation if request else None
    suggestions = await coaching_service.generate_suggestions(conversation)
    return CoachingResponse(suggestions=suggestions)
