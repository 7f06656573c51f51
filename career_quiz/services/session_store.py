# career_quiz/services/session_store.py
# Async persistence for quiz sessions over the quiz_results table.

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..constants import SessionStatus
from ..db.models import QuizSession
from ..errors import StorageError
from ..schemas.quiz import SessionCounts

logger = logging.getLogger(__name__)


class SessionStore:
    """
    CRUD over QuizSession rows. Writes are flushed, not committed; the
    request-scoped session dependency owns the transaction.

    Every SQLAlchemyError is re-raised as StorageError.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, record: QuizSession) -> QuizSession:
        try:
            self.db.add(record)
            await self.db.flush()
            await self.db.refresh(record)
        except SQLAlchemyError as e:
            logger.error(f"Failed to insert session {record.session_id}: {e}", exc_info=True)
            raise StorageError(f"Could not create session {record.session_id}") from e
        logger.debug(f"Inserted session {record.session_id} with id {record.id}")
        return record

    async def update(self, record: QuizSession) -> QuizSession:
        try:
            await self.db.flush()
            await self.db.refresh(record)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update session {record.session_id}: {e}", exc_info=True)
            raise StorageError(f"Could not update session {record.session_id}") from e
        return record

    async def get_by_id(self, record_id: int) -> Optional[QuizSession]:
        try:
            return await self.db.get(QuizSession, record_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load session id={record_id}: {e}", exc_info=True)
            raise StorageError(f"Could not load session {record_id}") from e

    async def get_by_session_id(self, session_id: str) -> Optional[QuizSession]:
        try:
            result = await self.db.execute(select(QuizSession).where(QuizSession.session_id == session_id))
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load session {session_id}: {e}", exc_info=True)
            raise StorageError(f"Could not load session {session_id}") from e

    async def list_by_status(self, status: Optional[SessionStatus] = None) -> List[QuizSession]:
        """Lists sessions newest first, optionally filtered by status."""
        query = select(QuizSession)
        if status is not None:
            query = query.where(QuizSession.status == SessionStatus(status).value)
        query = query.order_by(QuizSession.started_at.desc(), QuizSession.id.desc())
        try:
            result = await self.db.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Failed to list sessions (status={status}): {e}", exc_info=True)
            raise StorageError("Could not list sessions") from e

    async def delete_by_id(self, record_id: int) -> bool:
        """Returns True when a row was removed."""
        try:
            result = await self.db.execute(delete(QuizSession).where(QuizSession.id == record_id))
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete session id={record_id}: {e}", exc_info=True)
            raise StorageError(f"Could not delete session {record_id}") from e
        deleted = (result.rowcount or 0) > 0
        if deleted:
            logger.info(f"Deleted session id={record_id}")
        return deleted

    async def count_by_status(self, now: Optional[datetime] = None) -> SessionCounts:
        """
        Totals per status plus the number of sessions started since
        midnight UTC of the current day.
        """
        now = now or datetime.now(timezone.utc)
        start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
        try:
            rows = await self.db.execute(
                select(QuizSession.status, func.count(QuizSession.id)).group_by(QuizSession.status)
            )
            per_status = {status: count for status, count in rows.all()}
            today = await self.db.scalar(
                select(func.count(QuizSession.id)).where(QuizSession.started_at >= start_of_day)
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to count sessions: {e}", exc_info=True)
            raise StorageError("Could not count sessions") from e

        complete = per_status.get(SessionStatus.COMPLETE.value, 0)
        incomplete = per_status.get(SessionStatus.INCOMPLETE.value, 0)
        return SessionCounts(
            total=sum(per_status.values()),
            complete=complete,
            incomplete=incomplete,
            today=today or 0,
        )
