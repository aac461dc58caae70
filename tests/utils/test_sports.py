import pytest

from app.models import SportDivision, SportLevel
from app.utils.sports import format_category_name, format_division, format_level


class TestFormatDivision:
    @pytest.mark.parametrize("raw,expected", [
        ("men", "Men's"),
        ("women", "Women's"),
        ("mixed", "Mixed"),
    ])
    def test_known(self, raw, expected):
        assert format_division(raw) == expected

    def test_enum_member(self):
        assert format_division(SportDivision.women) == "Women's"

    def test_unknown_passes_through(self):
        assert format_division("veterans") == "veterans"


class TestFormatLevel:
    @pytest.mark.parametrize("raw,expected", [
        ("elementary", "Elementary"),
        ("high_school", "High School"),
        ("college", "College"),
    ])
    def test_known(self, raw, expected):
        assert format_level(raw) == expected

    def test_unknown_passes_through(self):
        assert format_level("open") == "open"


def test_format_category_name():
    assert format_category_name("men", "college") == "Men's College"
    assert format_category_name(SportDivision.mixed, SportLevel.high_school) == "Mixed High School"
