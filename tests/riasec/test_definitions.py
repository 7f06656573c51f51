import pytest
from pydantic import ValidationError

from career_quiz.riasec.definitions import INTEREST_TYPES, RIASEC_ORDER, get_interest_type, type_name


def test_six_types_in_canonical_order():
    assert tuple(INTEREST_TYPES) == RIASEC_ORDER == ("R", "I", "A", "S", "E", "C")


@pytest.mark.parametrize("code", RIASEC_ORDER)
def test_every_type_is_fully_described(code):
    info = get_interest_type(code)
    assert info.code == code
    assert info.name and info.name_nepali and info.subtitle and info.focus and info.description
    assert info.color.startswith("#") and info.color_light.startswith("#")
    # Report detail pages show up to these many entries
    assert len(info.traits) >= 8
    assert len(info.hobbies) >= 6
    assert len(info.careers) >= 12
    assert len(info.occupations_extended) >= 20
    assert info.strengths and info.abilities and info.likes
    assert info.college_majors and info.related_pathways


def test_names():
    assert [INTEREST_TYPES[c].name for c in RIASEC_ORDER] == [
        "Realistic", "Investigative", "Artistic", "Social", "Enterprising", "Conventional",
    ]
    assert INTEREST_TYPES["S"].name_nepali == "सामाजिक"


def test_interest_types_are_frozen():
    with pytest.raises(ValidationError):
        INTEREST_TYPES["R"].name = "Changed"


def test_unknown_letter():
    assert type_name("X") == "X"
    with pytest.raises(KeyError):
        get_interest_type("X")
