# =============================================================================
# Lineage Capture Router
# =============================================================================
# Entry point for OpenLineage run events posted by the processing engine.
# =============================================================================

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel, ConfigDict, Field
from starlette.concurrency import run_in_threadpool

from app.auth.dependencies import require_function_key
from app.auth.providers import AuthorizedCaller
from app.services.ingestion_service import IngestionService, get_ingestion_service
from lineage_capture.errors import GatewayError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/1", tags=["lineage"])


class LineageCaptureResponse(BaseModel):
    """Response for a captured or skipped lineage event."""

    model_config = ConfigDict(populate_by_name=True)

    status: str
    message: str
    record_key: Optional[str] = Field(None, alias="recordKey")
    file_path: Optional[str] = Field(None, alias="filePath")


@router.api_route(
    "/lineage",
    methods=["GET", "POST"],
    response_model=LineageCaptureResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
async def capture_lineage(
    request: Request,
    event_type: Optional[str] = Query(
        None, alias="eventType", description="Overrides the payload eventType"
    ),
    caller: AuthorizedCaller = Depends(require_function_key),
    service: IngestionService = Depends(get_ingestion_service),
) -> LineageCaptureResponse:
    """
    Capture a lineage event.

    Relevant events (COMPLETE runs of an allow-listed operation) are archived
    and tracked; everything else is acknowledged as skipped.
    """
    logger.info("Lineage capture started processing a request.")

    body = await request.body()

    try:
        result = await run_in_threadpool(service.ingest, body, event_type=event_type)
    except GatewayError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    return LineageCaptureResponse(
        status=result.status,
        message=result.message,
        record_key=result.record_key,
        file_path=result.file_path,
    )
