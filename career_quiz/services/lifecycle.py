# career_quiz/services/lifecycle.py
# Registration and completion of quiz sessions.

import logging
import secrets
import time
from datetime import datetime, timezone
from typing import List, Optional

from ..constants import SESSION_ID_PREFIX, SessionStatus
from ..core.config import quiz_settings
from ..db.models import QuizSession
from ..riasec.scoring import compute_top_three_code
from ..schemas.quiz import PROFILE_FIELDS, CompleteRequest, Profile, SessionCounts
from .session_store import SessionStore

logger = logging.getLogger(__name__)


def generate_session_id() -> str:
    """quiz_<epoch millis>_<random hex>"""
    return f"{SESSION_ID_PREFIX}{int(time.time() * 1000)}_{secrets.token_hex(6)}"


def _profile_columns(profile: Profile) -> dict:
    return {field: getattr(profile, field) for field in PROFILE_FIELDS}


class SessionLifecycle:
    """
    Moves a session from registration (incomplete) to completion.

    Store failures propagate as StorageError; nothing is retried.
    """

    def __init__(self, store: SessionStore, max_score: int = quiz_settings.max_score):
        self.store = store
        self.max_score = max_score

    async def register(self, profile: Profile, user_agent: Optional[str] = None,
                       ip_address: Optional[str] = None) -> str:
        session_id = generate_session_id()
        record = QuizSession(
            session_id=session_id,
            status=SessionStatus.INCOMPLETE.value,
            started_at=datetime.now(timezone.utc),
            user_agent=user_agent,
            ip_address=ip_address,
            **_profile_columns(profile),
        )
        await self.store.create(record)
        logger.info(f"Registered session {session_id}")
        return session_id

    async def complete(self, request: CompleteRequest, user_agent: Optional[str] = None,
                       ip_address: Optional[str] = None) -> QuizSession:
        """
        Records a finished quiz. Updates the registered session in place when
        request.session_id resolves, otherwise inserts a new complete session
        built from the request's profile fields.
        """
        code = compute_top_three_code(request.scores, self.max_score)
        if request.top_three_code and request.top_three_code.upper() != code:
            logger.warning(
                f"Client code {request.top_three_code!r} differs from computed code {code!r} "
                f"for session {request.session_id}; storing computed code"
            )
        completed_at = request.completed_at or datetime.now(timezone.utc)

        record = None
        if request.session_id:
            record = await self.store.get_by_session_id(request.session_id)
            if record is None:
                logger.warning(f"Unknown session {request.session_id}; inserting a new complete session")

        if record is not None:
            if record.is_complete:
                logger.warning(f"Session {record.session_id} was already complete; overwriting result")
            record.answers = request.answers
            record.scores = dict(request.scores)
            record.top_three_code = code
            record.time_taken = request.time_taken
            record.status = SessionStatus.COMPLETE.value
            record.completed_at = completed_at
            await self.store.update(record)
            logger.info(f"Completed session {record.session_id} with code {code}")
            return record

        record = QuizSession(
            session_id=generate_session_id(),
            answers=request.answers,
            scores=dict(request.scores),
            top_three_code=code,
            time_taken=request.time_taken,
            status=SessionStatus.COMPLETE.value,
            started_at=datetime.now(timezone.utc),
            completed_at=completed_at,
            user_agent=user_agent,
            ip_address=ip_address,
            **_profile_columns(request),
        )
        await self.store.create(record)
        logger.info(f"Inserted complete session {record.session_id} with code {code}")
        return record

    # --- Admin pass-throughs ---

    async def get_by_id(self, record_id: int) -> Optional[QuizSession]:
        return await self.store.get_by_id(record_id)

    async def get_by_session_id(self, session_id: str) -> Optional[QuizSession]:
        return await self.store.get_by_session_id(session_id)

    async def list_by_status(self, status: Optional[SessionStatus] = None) -> List[QuizSession]:
        return await self.store.list_by_status(status)

    async def delete_by_id(self, record_id: int) -> bool:
        return await self.store.delete_by_id(record_id)

    async def count_by_status(self) -> SessionCounts:
        return await self.store.count_by_status()
