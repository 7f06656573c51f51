# career_quiz/services/analytics.py
# Aggregates over complete sessions for the admin dashboard.

import logging
from collections import Counter
from datetime import datetime
from typing import Iterable, List, Optional

from ..constants import SessionStatus
from ..db.models import QuizSession
from ..riasec.definitions import RIASEC_ORDER
from ..schemas.quiz import (
    AnalyticsReport,
    AverageScores,
    CodeCount,
    EducationCount,
    GenderCount,
    MonthlyCount,
)

logger = logging.getLogger(__name__)

TOP_CODES_LIMIT = 10
TREND_MONTHS = 12


def _average(values: List[int]) -> Optional[float]:
    if not values:
        return None
    return round(sum(values) / len(values), 2)


def _month_key(value: datetime) -> str:
    return value.strftime("%Y-%m")


def build_analytics(records: Iterable[QuizSession]) -> AnalyticsReport:
    """
    Computes the dashboard aggregates. Incomplete sessions are ignored,
    as are null values within each aggregate.
    """
    complete = [r for r in records if r.status == SessionStatus.COMPLETE.value]

    genders = Counter(r.gender for r in complete if r.gender)
    educations = Counter(r.education for r in complete if r.education)
    codes = Counter(r.top_three_code for r in complete if r.top_three_code)
    months = Counter(_month_key(r.completed_at) for r in complete if r.completed_at)

    per_type = {code: [] for code in RIASEC_ORDER}
    for record in complete:
        if not record.scores:
            continue
        for code in RIASEC_ORDER:
            value = record.scores.get(code)
            if value is not None:
                per_type[code].append(value)

    # most_common keeps first-seen order among equal counts
    top_codes = [CodeCount(top_three_code=code, count=count) for code, count in codes.most_common(TOP_CODES_LIMIT)]
    trends = [MonthlyCount(month=month, count=months[month]) for month in sorted(months, reverse=True)[:TREND_MONTHS]]

    logger.debug(f"Analytics computed over {len(complete)} complete sessions")
    return AnalyticsReport(
        gender_distribution=[GenderCount(gender=g, count=c) for g, c in sorted(genders.items())],
        top_holland_codes=top_codes,
        education_distribution=[EducationCount(education=e, count=c) for e, c in sorted(educations.items())],
        average_scores=AverageScores(**{f"{code.lower()}_avg": _average(per_type[code]) for code in RIASEC_ORDER}),
        monthly_trends=trends,
    )
