# career_quiz/riasec/scoring.py
# Validation and ranking of the six per-type tallies.

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from ..errors import InvalidScoresError
from .definitions import DEFAULT_MAX_SCORE, RIASEC_ORDER

logger = logging.getLogger(__name__)

RankedScores = List[Tuple[str, int]]


def normalize_scores(scores: Optional[Mapping[str, int]], max_score: int = DEFAULT_MAX_SCORE) -> Dict[str, int]:
    """
    Validates a tally map and fills in missing types with zero.

    Args:
        scores: Mapping of type letter to tally. May be partial or None.
        max_score: Largest tally a single type may hold.

    Returns:
        A dict with all six letters in canonical order.

    Raises:
        InvalidScoresError: on an unknown letter, a non-integer tally,
            or a tally outside [0, max_score].
    """
    scores = scores or {}
    unknown = [key for key in scores if key not in RIASEC_ORDER]
    if unknown:
        raise InvalidScoresError(f"Unknown RIASEC type code(s): {', '.join(sorted(map(str, unknown)))}")

    normalized: Dict[str, int] = {}
    for code in RIASEC_ORDER:
        value = scores.get(code, 0)
        if value is None:
            value = 0
        # bool is an int subclass but never a valid tally
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidScoresError(f"Score for {code} must be an integer, got {value!r}")
        if value < 0 or value > max_score:
            raise InvalidScoresError(f"Score for {code} must be between 0 and {max_score}, got {value}")
        normalized[code] = value
    return normalized


def rank(scores: Mapping[str, int]) -> RankedScores:
    """
    Orders all six types by tally, highest first.

    Equal tallies keep canonical R, I, A, S, E, C order, since the sort is
    stable over the canonical sequence. Missing types count as zero.
    """
    pairs = [(code, scores.get(code, 0) or 0) for code in RIASEC_ORDER]
    return sorted(pairs, key=lambda pair: pair[1], reverse=True)


def top_three(ranked: RankedScores) -> str:
    return "".join(code for code, _ in ranked[:3])


def compute_top_three_code(scores: Optional[Mapping[str, int]], max_score: int = DEFAULT_MAX_SCORE) -> str:
    """Normalises, ranks and returns the three-letter Holland code."""
    return top_three(rank(normalize_scores(scores, max_score)))


def percentage(score: int, max_score: int = DEFAULT_MAX_SCORE) -> float:
    if max_score <= 0:
        return 0.0
    value = (score / max_score) * 100
    return round(min(max(value, 0.0), 100.0), 1)
