# career_quiz/schemas/quiz.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ..core.config import quiz_settings
from ..riasec.scoring import compute_top_three_code, normalize_scores


class CamelModel(BaseModel):
    """Wire models accept and emit camelCase keys; snake_case is accepted too."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Profile(CamelModel):
    full_name: Optional[str] = Field(None, description="Respondent's full name.")
    email: Optional[str] = None
    phone: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=150)
    gender: Optional[str] = None
    education: Optional[str] = Field(None, description="Education level key, e.g. 'high_school'.")
    occupation: Optional[str] = None
    location: Optional[str] = None

    @field_validator("age", mode="before")
    @classmethod
    def _blank_age_is_none(cls, value):
        # HTML forms post an empty string for an untouched number input
        if isinstance(value, str) and not value.strip():
            return None
        return value


class RegisterRequest(Profile):
    full_name: str = Field(..., description="Respondent's full name.")

    @field_validator("full_name")
    @classmethod
    def _full_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("fullName must not be blank")
        return value


class RegisterResponse(CamelModel):
    success: bool = True
    session_id: str


class CompleteRequest(Profile):
    """
    Completion payload. When session_id is absent or unknown, the profile
    fields are used to insert a new complete session instead.
    """
    session_id: Optional[str] = None
    answers: Optional[Any] = None
    scores: Dict[str, int] = Field(default_factory=dict)
    # Advisory; the stored code is always recomputed from scores
    top_three_code: Optional[str] = None
    time_taken: Optional[int] = Field(None, ge=0)
    completed_at: Optional[datetime] = None

    @field_validator("scores", mode="before")
    @classmethod
    def _null_scores_are_empty(cls, value):
        return {} if value is None else value

    @field_validator("scores")
    @classmethod
    def _validate_scores(cls, value: Dict[str, int]) -> Dict[str, int]:
        return normalize_scores(value, quiz_settings.max_score)


class CompleteResponse(CamelModel):
    success: bool = True
    session_id: str
    top_three_code: str


class ReportRequest(Profile):
    """A result the client holds but may never have saved."""
    scores: Dict[str, int] = Field(default_factory=dict)
    top_three_code: Optional[str] = None

    @field_validator("scores", mode="before")
    @classmethod
    def _null_scores_are_empty(cls, value):
        return {} if value is None else value

    @field_validator("scores")
    @classmethod
    def _validate_scores(cls, value: Dict[str, int]) -> Dict[str, int]:
        return normalize_scores(value, quiz_settings.max_score)

    @field_validator("top_three_code")
    @classmethod
    def _normalize_code(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip().upper() or None

    @model_validator(mode="after")
    def _default_code_from_scores(self):
        # A payload without any scores has nothing to derive a code from
        if not self.top_three_code and "scores" in self.model_fields_set:
            self.top_three_code = compute_top_three_code(self.scores, quiz_settings.max_score)
        return self


class SessionRecord(BaseModel):
    """Admin view of a stored session; keys mirror the table columns."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    session_id: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    education: Optional[str] = None
    occupation: Optional[str] = None
    location: Optional[str] = None
    answers: Optional[Any] = None
    scores: Optional[Dict[str, int]] = None
    top_three_code: Optional[str] = None
    time_taken: Optional[int] = None
    status: str
    started_at: datetime
    completed_at: Optional[datetime] = None
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None


class SessionCounts(BaseModel):
    total: int = 0
    complete: int = 0
    incomplete: int = 0
    today: int = 0


class UserAnswers(CamelModel):
    full_name: Optional[str] = None
    answers: Any = Field(default_factory=dict)


class DeleteRequest(BaseModel):
    id: Optional[int] = None


class AdminLoginRequest(BaseModel):
    username: str = ""
    password: str = ""


class SuccessResponse(BaseModel):
    success: bool = True


class AuthStatus(BaseModel):
    authenticated: bool


class ErrorResponse(BaseModel):
    """Error body used across the API."""
    error: str


# --- Analytics ---

class GenderCount(BaseModel):
    gender: str
    count: int


class EducationCount(BaseModel):
    education: str
    count: int


class CodeCount(BaseModel):
    top_three_code: str
    count: int


class MonthlyCount(BaseModel):
    month: str  # YYYY-MM
    count: int


class AverageScores(BaseModel):
    r_avg: Optional[float] = None
    i_avg: Optional[float] = None
    a_avg: Optional[float] = None
    s_avg: Optional[float] = None
    e_avg: Optional[float] = None
    c_avg: Optional[float] = None


class AnalyticsReport(CamelModel):
    gender_distribution: List[GenderCount] = Field(default_factory=list)
    top_holland_codes: List[CodeCount] = Field(default_factory=list)
    education_distribution: List[EducationCount] = Field(default_factory=list)
    average_scores: AverageScores = Field(default_factory=AverageScores)
    monthly_trends: List[MonthlyCount] = Field(default_factory=list)


PROFILE_FIELDS = ("full_name", "email", "phone", "age", "gender", "education", "occupation", "location")


def profile_from(source: Any) -> Profile:
    """Builds a Profile from any object carrying the profile attributes (ORM row or request)."""
    return Profile(**{field: getattr(source, field, None) for field in PROFILE_FIELDS})
