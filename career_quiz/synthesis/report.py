# career_quiz/synthesis/report.py
# Assembles a stored (or client-held) quiz result into a structured report
# document. Presentation lives in career_quiz.rendering.

import logging
from datetime import date
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from ..constants import NOT_SPECIFIED, SessionStatus
from ..core.config import quiz_settings
from ..errors import DataIntegrityError, InvalidScoresError, SessionIncompleteError
from ..riasec.definitions import INTEREST_TYPES, InterestType
from ..riasec.scoring import normalize_scores, percentage, rank
from ..schemas.quiz import Profile, profile_from
from .summary import SummaryGenerator

logger = logging.getLogger(__name__)

TRAITS_LIMIT = 8
HOBBIES_LIMIT = 6
CAREERS_LIMIT = 12
OCCUPATIONS_LIMIT = 20


class Branding(BaseModel):
    name: str = "Just Connect"
    name_nepali: str = "जस्ट कनेक्ट"
    website: str = "https://justconnect.online/"
    email: str = "info@justconnect.online"
    tagline: str = "Empowering Your Career Journey"
    tagline_nepali: str = "तपाईंको क्यारियर यात्रामा सशक्तिकरण"


class NextStep(BaseModel):
    title: str
    description: str


NEXT_STEPS: List[NextStep] = [
    NextStep(
        title="Explore Career Options",
        description="Research the recommended careers for your top interest types and learn about educational requirements.",
    ),
    NextStep(
        title="Seek Professional Guidance",
        description="Connect with a career counselor to discuss your results and create a personalized career plan.",
    ),
    NextStep(
        title="Gain Experience",
        description="Look for internships, volunteer opportunities, or job shadowing in your areas of interest.",
    ),
]


# --- Sections ---

class CoverSection(BaseModel):
    kind: Literal["cover"] = "cover"
    full_name: str
    education_display: str
    location_display: str
    code_letters: List[str]
    report_date: str
    branding: Branding = Field(default_factory=Branding)


class ProfileField(BaseModel):
    label: str
    value: str


class ProfileSection(BaseModel):
    kind: Literal["profile"] = "profile"
    fields: List[ProfileField]
    summary_text: str
    code_meaning: str
    code_meaning_nepali: str


class ScoreRow(BaseModel):
    rank: int
    code: str
    name: str
    name_nepali: str
    icon: str
    color: str
    score: int
    max_score: int
    percentage: float
    is_top: bool


class ScoresSection(BaseModel):
    kind: Literal["scores"] = "scores"
    rows: List[ScoreRow]


class TypeDetailSection(BaseModel):
    kind: Literal["type_detail"] = "type_detail"
    rank: int
    code: str
    name: str
    name_nepali: str
    subtitle: str
    subtitle_nepali: str
    focus: str
    description: str
    icon: str
    color: str
    color_light: str
    score: int
    max_score: int
    traits: List[str]
    strengths: List[str]
    abilities: List[str]
    likes: List[str]
    hobbies: List[str]
    college_majors: List[str]
    related_pathways: List[str]
    careers: List[str]
    occupations_extended: List[str]


class SummaryCard(BaseModel):
    code: str
    name: str
    icon: str
    color: str
    color_light: str


class SummarySection(BaseModel):
    kind: Literal["summary"] = "summary"
    code: str
    paragraph: str
    cards: List[SummaryCard]
    next_steps: List[NextStep]


ReportSection = Annotated[
    Union[CoverSection, ProfileSection, ScoresSection, TypeDetailSection, SummarySection],
    Field(discriminator="kind"),
]


class ReportDocument(BaseModel):
    full_name: str
    code: str
    report_date: str
    sections: List[ReportSection]

    def sections_of(self, kind: str) -> List[Any]:
        return [section for section in self.sections if section.kind == kind]


# --- Helpers ---

def format_report_date(value: date) -> str:
    """e.g. 'October 18, 2026'"""
    return f"{value:%B} {value.day}, {value.year}"


def _text(value: Any) -> str:
    if value is None:
        return NOT_SPECIFIED
    value = str(value).strip()
    return value or NOT_SPECIFIED


def gender_display(gender: Optional[str]) -> str:
    if not gender:
        return NOT_SPECIFIED
    return {"male": "Male", "female": "Female"}.get(gender.lower(), "Other")


def education_label(education: Optional[str]) -> str:
    return education.replace("_", " ").title() if education else NOT_SPECIFIED


def resolve_code(code: Optional[str]) -> List[InterestType]:
    """
    Resolves a three-letter code against the domain tables.

    Raises:
        DataIntegrityError: when the code is missing, not three letters long,
            or contains a letter outside R, I, A, S, E, C.
    """
    if not code or len(code) != 3:
        raise DataIntegrityError(f"Holland code must have exactly three letters, got {code!r}")
    unknown = [letter for letter in code if letter not in INTEREST_TYPES]
    if unknown:
        raise DataIntegrityError(f"Holland code {code!r} contains unknown type(s): {', '.join(unknown)}")
    return [INTEREST_TYPES[letter] for letter in code]


def build_report(subject: Any, summary_text: str, max_score: int = quiz_settings.max_score,
                 report_date: Optional[date] = None) -> ReportDocument:
    """
    Pure transformation of a quiz result into a ReportDocument.

    `subject` is anything exposing the profile attributes plus `scores` and
    `top_three_code`: a QuizSession row or a ReportRequest.
    """
    code = subject.top_three_code
    top_types = resolve_code(code)
    try:
        scores = normalize_scores(subject.scores, max_score)
    except InvalidScoresError as e:
        raise DataIntegrityError(f"Stored scores are malformed: {e}") from e

    report_date = report_date or date.today()
    date_text = format_report_date(report_date)
    profile: Profile = profile_from(subject)
    full_name = (profile.full_name or "").strip() or NOT_SPECIFIED

    cover = CoverSection(
        full_name=full_name,
        education_display=profile.education.replace("_", " ").upper() if profile.education else "Student",
        location_display=profile.location or "Nepal",
        code_letters=list(code),
        report_date=date_text,
    )

    profile_section = ProfileSection(
        fields=[
            ProfileField(label="Full Name", value=_text(profile.full_name)),
            ProfileField(label="Email", value=_text(profile.email)),
            ProfileField(label="Phone", value=_text(profile.phone)),
            ProfileField(label="Age", value=_text(profile.age)),
            ProfileField(label="Gender", value=gender_display(profile.gender)),
            ProfileField(label="Education", value=education_label(profile.education)),
            ProfileField(label="Occupation", value=_text(profile.occupation)),
            ProfileField(label="Location", value=_text(profile.location)),
        ],
        summary_text=summary_text,
        code_meaning=" - ".join(t.name for t in top_types),
        code_meaning_nepali=" - ".join(t.name_nepali for t in top_types),
    )

    ranked = rank(scores)
    scores_section = ScoresSection(rows=[
        ScoreRow(
            rank=index + 1,
            code=letter,
            name=INTEREST_TYPES[letter].name,
            name_nepali=INTEREST_TYPES[letter].name_nepali,
            icon=INTEREST_TYPES[letter].icon,
            color=INTEREST_TYPES[letter].color,
            score=score,
            max_score=max_score,
            percentage=percentage(score, max_score),
            is_top=index < 3,
        )
        for index, (letter, score) in enumerate(ranked)
    ])

    details = [
        TypeDetailSection(
            rank=index + 1,
            code=t.code,
            name=t.name,
            name_nepali=t.name_nepali,
            subtitle=t.subtitle,
            subtitle_nepali=t.subtitle_nepali,
            focus=t.focus,
            description=t.description,
            icon=t.icon,
            color=t.color,
            color_light=t.color_light,
            score=scores[t.code],
            max_score=max_score,
            traits=list(t.traits[:TRAITS_LIMIT]),
            strengths=list(t.strengths),
            abilities=list(t.abilities),
            likes=list(t.likes),
            hobbies=list(t.hobbies[:HOBBIES_LIMIT]),
            college_majors=list(t.college_majors),
            related_pathways=list(t.related_pathways),
            careers=list(t.careers[:CAREERS_LIMIT]),
            occupations_extended=list(t.occupations_extended[:OCCUPATIONS_LIMIT]),
        )
        for index, t in enumerate(top_types)
    ]

    summary_section = SummarySection(
        code=code,
        paragraph=(
            f"Based on your Holland Code {code}, you show strong interests in "
            f"{', '.join(t.name for t in top_types)} areas. "
            "This suggests you would thrive in careers that combine these interests."
        ),
        cards=[
            SummaryCard(code=t.code, name=t.name, icon=t.icon, color=t.color, color_light=t.color_light)
            for t in top_types
        ],
        next_steps=[step.model_copy() for step in NEXT_STEPS],
    )

    return ReportDocument(
        full_name=full_name,
        code=code,
        report_date=date_text,
        sections=[cover, profile_section, scores_section, *details, summary_section],
    )


class ReportAssembler:
    """Resolves the summary text, then builds the report document."""

    def __init__(self, summary_generator: SummaryGenerator, max_score: int = quiz_settings.max_score):
        self.summary_generator = summary_generator
        self.max_score = max_score

    async def assemble(self, subject: Any, report_date: Optional[date] = None) -> ReportDocument:
        """
        Raises:
            SessionIncompleteError: when subject is a stored session that was never completed.
            DataIntegrityError: when the code or scores do not match the domain tables.
        """
        status = getattr(subject, "status", None)
        if status is not None and status != SessionStatus.COMPLETE.value:
            raise SessionIncompleteError(f"Session {getattr(subject, 'session_id', '?')} has not been completed")

        # Fail before spending a remote call on an unusable code
        resolve_code(subject.top_three_code)

        summary_text = await self.summary_generator.generate(profile_from(subject), subject.top_three_code)
        document = build_report(subject, summary_text, self.max_score, report_date)
        logger.info(f"Assembled report for code {document.code}")
        return document
