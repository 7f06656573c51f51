# career_quiz/routers/admin.py
# Admin console API: cookie-token login, session listing, counts,
# deletion, answer review, per-session reports, CSV export and analytics.

import logging
from typing import List, Optional

from fastapi import APIRouter, Cookie, Depends, HTTPException, Query, Response
from fastapi.responses import HTMLResponse, JSONResponse
from redis.exceptions import RedisError

from ..auth.credentials import require_admin, verify_credentials
from ..auth.token_store import AdminTokenStore, get_token_store
from ..constants import ADMIN_COOKIE_NAME, ReportFormat, SessionStatus
from ..core.config import admin_settings
from ..errors import DataIntegrityError, SessionIncompleteError, StorageError
from ..rendering.html import render_report_html, report_filename
from ..schemas.quiz import (
    AdminLoginRequest,
    AnalyticsReport,
    AuthStatus,
    DeleteRequest,
    SessionCounts,
    SessionRecord,
    SuccessResponse,
    UserAnswers,
)
from ..services.analytics import build_analytics
from ..services.export import csv_download_response
from ..services.lifecycle import SessionLifecycle
from ..synthesis.report import ReportAssembler
from .dependencies import get_lifecycle, get_report_assembler

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login", response_model=SuccessResponse)
async def login(
    request: AdminLoginRequest,
    response: Response,
    store: AdminTokenStore = Depends(get_token_store),
):
    if not verify_credentials(request.username, request.password):
        logger.warning(f"Failed admin login for {request.username!r}")
        raise HTTPException(status_code=401, detail="Invalid credentials")
    try:
        token = await store.issue()
    except (RuntimeError, RedisError) as e:
        logger.error(f"Could not issue admin token: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Login failed")
    response.set_cookie(
        ADMIN_COOKIE_NAME,
        token,
        max_age=admin_settings.token_ttl_seconds,
        httponly=True,
        path="/",
    )
    logger.info("Admin logged in")
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    response: Response,
    admin_token: Optional[str] = Cookie(default=None, alias=ADMIN_COOKIE_NAME),
    store: AdminTokenStore = Depends(get_token_store),
):
    await store.revoke(admin_token)
    response.delete_cookie(ADMIN_COOKIE_NAME, path="/", httponly=True)
    return SuccessResponse()


@router.get("/check-auth", response_model=AuthStatus)
async def check_auth(
    admin_token: Optional[str] = Cookie(default=None, alias=ADMIN_COOKIE_NAME),
    store: AdminTokenStore = Depends(get_token_store),
):
    if await store.is_valid(admin_token):
        return AuthStatus(authenticated=True)
    return JSONResponse(status_code=401, content={"authenticated": False})


@router.get("/results", response_model=List[SessionRecord], dependencies=[Depends(require_admin)])
async def list_results(
    status: Optional[SessionStatus] = Query(None),
    lifecycle: SessionLifecycle = Depends(get_lifecycle),
):
    """All sessions, newest first, optionally filtered by status."""
    try:
        records = await lifecycle.list_by_status(status)
    except StorageError as e:
        logger.error(f"Error fetching results: {e.message}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch results")
    return [SessionRecord.model_validate(record) for record in records]


@router.get("/stats", response_model=SessionCounts, dependencies=[Depends(require_admin)])
async def stats(lifecycle: SessionLifecycle = Depends(get_lifecycle)):
    try:
        return await lifecycle.count_by_status()
    except StorageError as e:
        logger.error(f"Error fetching stats: {e.message}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch statistics")


@router.post("/delete", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
async def delete_result(request: DeleteRequest, lifecycle: SessionLifecycle = Depends(get_lifecycle)):
    if request.id is None:
        raise HTTPException(status_code=400, detail="User ID required")
    try:
        deleted = await lifecycle.delete_by_id(request.id)
    except StorageError as e:
        logger.error(f"Error deleting result {request.id}: {e.message}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete result")
    if not deleted:
        raise HTTPException(status_code=404, detail="User not found")
    return SuccessResponse()


@router.get("/export-csv", dependencies=[Depends(require_admin)])
async def export_csv(lifecycle: SessionLifecycle = Depends(get_lifecycle)):
    try:
        records = await lifecycle.list_by_status()
    except StorageError as e:
        logger.error(f"Error exporting CSV: {e.message}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to export data")
    logger.info(f"Exporting {len(records)} sessions to CSV")
    return csv_download_response(records)


@router.get("/analytics", response_model=AnalyticsReport, dependencies=[Depends(require_admin)])
async def analytics(lifecycle: SessionLifecycle = Depends(get_lifecycle)):
    try:
        records = await lifecycle.list_by_status(SessionStatus.COMPLETE)
    except StorageError as e:
        logger.error(f"Error fetching analytics: {e.message}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch analytics")
    return build_analytics(records)


@router.get("/user-report", dependencies=[Depends(require_admin)])
async def user_report(
    id: Optional[int] = Query(None),
    format: ReportFormat = Query(ReportFormat.HTML),
    lifecycle: SessionLifecycle = Depends(get_lifecycle),
    assembler: ReportAssembler = Depends(get_report_assembler),
):
    if id is None:
        raise HTTPException(status_code=400, detail="User ID required")
    try:
        record = await lifecycle.get_by_id(id)
    except StorageError as e:
        logger.error(f"Error loading session {id} for report: {e.message}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate report")
    if record is None:
        raise HTTPException(status_code=404, detail="User not found")

    try:
        document = await assembler.assemble(record)
    except SessionIncompleteError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except DataIntegrityError as e:
        logger.error(f"Stored session {id} cannot be reported: {e.message}")
        raise HTTPException(status_code=500, detail="Failed to generate report")

    if format == ReportFormat.JSON:
        return document.model_dump(mode="json")
    return HTMLResponse(
        render_report_html(document),
        headers={"Content-Disposition": f'inline; filename="{report_filename(record.full_name)}"'},
    )


@router.get("/user-answers", response_model=UserAnswers, dependencies=[Depends(require_admin)])
async def user_answers(id: Optional[int] = Query(None), lifecycle: SessionLifecycle = Depends(get_lifecycle)):
    if id is None:
        raise HTTPException(status_code=400, detail="User ID required")
    try:
        record = await lifecycle.get_by_id(id)
    except StorageError as e:
        logger.error(f"Error fetching answers for {id}: {e.message}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch answers")
    if record is None:
        raise HTTPException(status_code=404, detail="User not found")
    return UserAnswers(full_name=record.full_name, answers=record.answers or {})
