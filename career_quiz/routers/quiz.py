# career_quiz/routers/quiz.py
# Public quiz endpoints: registration, completion and report generation.

import logging
from typing import Tuple

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from ..constants import ReportFormat
from ..errors import DataIntegrityError, StorageError
from ..rendering.html import render_report_html, report_filename
from ..schemas.quiz import (
    CompleteRequest,
    CompleteResponse,
    RegisterRequest,
    RegisterResponse,
    ReportRequest,
)
from ..services.lifecycle import SessionLifecycle
from ..synthesis.report import ReportAssembler
from .dependencies import client_provenance, get_lifecycle, get_report_assembler

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/register-user", response_model=RegisterResponse)
async def register_user(
    request: RegisterRequest,
    lifecycle: SessionLifecycle = Depends(get_lifecycle),
    provenance: Tuple[str, str] = Depends(client_provenance),
):
    """Creates an incomplete session for a respondent who is about to start the quiz."""
    user_agent, ip_address = provenance
    try:
        session_id = await lifecycle.register(request, user_agent, ip_address)
    except StorageError as e:
        logger.error(f"Error registering user: {e.message}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to register user")
    return RegisterResponse(session_id=session_id)


@router.post("/save-quiz", response_model=CompleteResponse)
async def save_quiz(
    request: CompleteRequest,
    lifecycle: SessionLifecycle = Depends(get_lifecycle),
    provenance: Tuple[str, str] = Depends(client_provenance),
):
    """Records a finished quiz against its session, or as a new session when none is known."""
    user_agent, ip_address = provenance
    try:
        record = await lifecycle.complete(request, user_agent, ip_address)
    except StorageError as e:
        logger.error(f"Error saving quiz: {e.message}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save quiz results")
    return CompleteResponse(session_id=record.session_id, top_three_code=record.top_three_code)


@router.post("/generate-report")
@router.post("/generate-pdf", include_in_schema=False)
async def generate_report(
    request: ReportRequest,
    format: ReportFormat = Query(ReportFormat.HTML),
    assembler: ReportAssembler = Depends(get_report_assembler),
):
    """
    Builds a report for a result the client holds, saved or not.
    HTML is served as a download; JSON returns the structured document.
    """
    try:
        document = await assembler.assemble(request)
    except DataIntegrityError as e:
        logger.warning(f"Report requested for unusable result: {e.message}")
        raise HTTPException(status_code=422, detail=e.message)

    if format == ReportFormat.JSON:
        return document.model_dump(mode="json")
    return HTMLResponse(
        render_report_html(document),
        headers={"Content-Disposition": f'attachment; filename="{report_filename(request.full_name)}"'},
    )
