# career_quiz/routers/dependencies.py
from typing import Tuple

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.session import db_session
from ..services.lifecycle import SessionLifecycle
from ..services.session_store import SessionStore
from ..synthesis.report import ReportAssembler
from ..synthesis.summary import SummaryGenerator, get_summary_generator

UNKNOWN = "Unknown"


def get_session_store(db: AsyncSession = Depends(db_session)) -> SessionStore:
    return SessionStore(db)


def get_lifecycle(store: SessionStore = Depends(get_session_store)) -> SessionLifecycle:
    return SessionLifecycle(store)


def get_report_assembler(generator: SummaryGenerator = Depends(get_summary_generator)) -> ReportAssembler:
    return ReportAssembler(generator)


def client_provenance(request: Request) -> Tuple[str, str]:
    """(user_agent, ip_address) for the calling client. IP is truncated to the column width."""
    user_agent = request.headers.get("user-agent") or UNKNOWN
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        ip_address = forwarded.split(",")[0].strip()
    elif request.client:
        ip_address = request.client.host
    else:
        ip_address = UNKNOWN
    return user_agent, ip_address[:45]
