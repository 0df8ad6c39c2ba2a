"""Knowledge base API endpoints.

Routes:
- POST /knowledge/add - Add raw text, one document per paragraph
- POST /knowledge/upload - Add the text of an uploaded file

Dependencies: sales_coach.core.agent, sales_coach.core.knowledge
System role: Knowledge ingestion HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool

from sales_coach.api.deps import get_agent
from sales_coach.api.error_handling import handle_api_errors
from sales_coach.core.agent import SalesCoachAgent
from sales_coach.core.exceptions import ValidationError
from sales_coach.core.knowledge.uploads import save_upload_to_temp
from sales_coach.models.knowledge import KnowledgeAddRequest, KnowledgeIngestResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/knowledge", tags=["knowledge"])

MISSING_TEXT = "テキストが必要です"
MISSING_FILE = "ファイルが必要です"


@router.post("/add", response_model=KnowledgeIngestResponse)
@handle_api_errors
async def add_knowledge(
    request: KnowledgeAddRequest | None = None,
    agent: SalesCoachAgent = Depends(get_agent),
) -> KnowledgeIngestResponse:
    """Add knowledge text, split on blank lines."""
    if request is None or not request.text:
        raise ValidationError(MISSING_TEXT, field="text")

    result = await agent.ingest_text(request.text, source_label=request.source)
    return KnowledgeIngestResponse(
        success=True,
        message=f"{result.accepted_count}件のドキュメントが追加されました",
    )


@router.post("/upload", response_model=KnowledgeIngestResponse)
@handle_api_errors
async def upload_knowledge(
    file: UploadFile | None = File(default=None),
    agent: SalesCoachAgent = Depends(get_agent),
) -> KnowledgeIngestResponse:
    """Add the text content of an uploaded file.

    The upload is spooled to a temp file which is removed after ingestion,
    whether or not it succeeds.
    """
    if file is None or not file.filename:
        raise ValidationError(MISSING_FILE, field="file")

    filename = file.filename
    temp_path = await run_in_threadpool(save_upload_to_temp, file.file, filename)
    logger.info(
        f"{__name__}:upload_knowledge - Saved upload",
        extra={"upload_filename": filename, "temp_path": str(temp_path)},
    )

    result = await agent.ingest_file(temp_path, source_label=filename)
    return KnowledgeIngestResponse(
        success=True,
        message=f"ファイル '{filename}' から{result.accepted_count}件のドキュメントが追加されました",
    )
