"""Minutes API endpoints.

Routes:
- POST /minutes/summary - Summarise the user side of a conversation
- POST /minutes/extract - Extract agreements, concerns or action items

Dependencies: sales_coach.core.minutes
System role: Minutes drafting HTTP API
"""

from fastapi import APIRouter, Depends

from sales_coach.api.deps import get_minutes_service
from sales_coach.api.error_handling import handle_api_errors
from sales_coach.core.exceptions import ValidationError
from sales_coach.core.minutes import MinutesService
from sales_coach.models.minutes import (
    MinutesExtractRequest,
    MinutesExtractResponse,
    MinutesSummaryRequest,
    MinutesSummaryResponse,
)

router = APIRouter(prefix="/minutes", tags=["minutes"])

MISSING_SECTION = "有効なセクションが必要です"


@router.post("/summary", response_model=MinutesSummaryResponse)
@handle_api_errors
async def summarize(
    request: MinutesSummaryRequest | None = None,
    minutes_service: MinutesService = Depends(get_minutes_service),
) -> MinutesSummaryResponse:
    conversation = request.conversation if request else None
    summary = await minutes_service.summarize(conversation)
    return MinutesSummaryResponse(summary=summary)


@router.post("/extract", response_model=MinutesExtractResponse)
@handle_api_errors
async def extract(
    request: MinutesExtractRequest | None = None,
    minutes_service: MinutesService = Depends(get_minutes_service),
) -> MinutesExtractResponse:
    """Extract one minutes section as a list of items."""
    if request is None or request.section is None:
        raise ValidationError(MISSING_SECTION, field="section")

    items = await minutes_service.extract_section(request.conversation, request.section)
    return MinutesExtractResponse(section=request.section, items=items)
