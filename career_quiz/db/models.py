from datetime import datetime, timezone

from sqlalchemy import (
    MetaData,
    Column,
    Integer,
    String,
    Text,
    DateTime,
    JSON,
)
from sqlalchemy.orm import declarative_base

from ..constants import SessionStatus

# Define naming conventions for constraints and indexes
# https://alembic.sqlalchemy.org/en/latest/naming.html
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)
Base = declarative_base(metadata=metadata)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuizSession(Base):
    """One respondent's pass through the quiz, from registration to completion."""
    __tablename__ = "quiz_results"

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(String(100), unique=True, nullable=False)

    # Respondent profile
    full_name = Column(String(255))
    email = Column(String(255))
    phone = Column(String(50))
    age = Column(Integer)
    gender = Column(String(20))
    education = Column(String(100))
    occupation = Column(String(255))
    location = Column(String(255))

    # Results, unset while the session is incomplete
    answers = Column(JSON)
    scores = Column(JSON)  # {"R": int, "I": int, "A": int, "S": int, "E": int, "C": int}
    top_three_code = Column(String(10))
    time_taken = Column(Integer)  # seconds

    status = Column(String(20), nullable=False, default=SessionStatus.INCOMPLETE.value)
    started_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    # Provenance, written at creation only
    user_agent = Column(Text)
    ip_address = Column(String(45))

    @property
    def is_complete(self) -> bool:
        return self.status == SessionStatus.COMPLETE.value

    def __repr__(self) -> str:
        return f"<QuizSession id={self.id} session_id={self.session_id!r} status={self.status!r}>"
