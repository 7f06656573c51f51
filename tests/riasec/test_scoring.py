import itertools
import random

import pytest

from career_quiz.errors import InvalidScoresError
from career_quiz.riasec.definitions import RIASEC_ORDER
from career_quiz.riasec.scoring import (
    compute_top_three_code,
    normalize_scores,
    percentage,
    rank,
    top_three,
)


def test_tie_break_uses_canonical_order():
    scores = {"R": 5, "I": 5, "A": 5, "S": 3, "E": 2, "C": 1}
    for _ in range(5):
        assert top_three(rank(scores)) == "RIA"


def test_tie_break_ignores_input_key_order():
    scores = {"C": 4, "E": 4, "S": 4, "A": 4, "I": 4, "R": 4}
    assert [code for code, _ in rank(scores)] == list(RIASEC_ORDER)
    assert compute_top_three_code(scores) == "RIA"


def test_end_to_end_example_code():
    assert compute_top_three_code({"R": 6, "I": 4, "A": 2, "S": 7, "E": 1, "C": 3}) == "SRI"


def test_rank_properties_hold_for_random_maps():
    rng = random.Random(42)
    for _ in range(200):
        scores = {code: rng.randint(0, 7) for code in RIASEC_ORDER}
        ranked = rank(scores)
        assert len(ranked) == 6
        values = [score for _, score in ranked]
        assert all(a >= b for a, b in itertools.pairwise(values))
        code = top_three(ranked)
        assert len(code) == 3
        assert len(set(code)) == 3
        assert set(code) <= set(RIASEC_ORDER)


def test_all_zero_scores_still_give_three_letters():
    assert compute_top_three_code({}) == "RIA"


def test_normalize_fills_missing_types_with_zero():
    assert normalize_scores({"S": 3}) == {"R": 0, "I": 0, "A": 0, "S": 3, "E": 0, "C": 0}
    assert normalize_scores(None) == {code: 0 for code in RIASEC_ORDER}


@pytest.mark.parametrize("scores", [
    {"X": 1},
    {"R": 8},
    {"R": -1},
    {"R": "high"},
    {"R": 2.5},
])
def test_normalize_rejects_malformed_scores(scores):
    with pytest.raises(InvalidScoresError):
        normalize_scores(scores, max_score=7)


def test_invalid_scores_error_is_a_value_error():
    assert issubclass(InvalidScoresError, ValueError)


def test_percentage_is_clamped_and_rounded():
    assert percentage(7, 7) == 100.0
    assert percentage(3, 7) == 42.9
    assert percentage(0, 7) == 0.0
    assert percentage(9, 7) == 100.0
    assert percentage(3, 0) == 0.0
