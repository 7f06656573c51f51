# This file makes the 'riasec' directory a Python package.

from .definitions import INTEREST_TYPES, RIASEC_ORDER, DEFAULT_MAX_SCORE, InterestType, get_interest_type
from .scoring import rank, top_three, compute_top_three_code, normalize_scores, percentage

__all__ = [
    "INTEREST_TYPES",
    "RIASEC_ORDER",
    "DEFAULT_MAX_SCORE",
    "InterestType",
    "get_interest_type",
    "rank",
    "top_three",
    "compute_top_three_code",
    "normalize_scores",
    "percentage",
]
