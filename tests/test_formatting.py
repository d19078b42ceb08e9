"""Tests for the shared display helpers."""

from __future__ import annotations

import pytest

from resumify.services.formatting import (
    display_text,
    format_date_range,
    format_education_year,
    format_technologies,
    is_empty,
    skill_level_dots,
)


class TestFormatDateRange:
    def test_start_and_end(self):
        assert format_date_range({"startDate": "2019", "endDate": "2021"}) == "2019 - 2021"

    def test_current_wins_over_end(self):
        record = {"startDate": "2019", "endDate": "2021", "current": True}
        assert format_date_range(record) == "2019 - Present"

    @pytest.mark.parametrize("label", ["Present", "present", "PRESENT"])
    def test_present_casing(self, label):
        assert format_date_range({"startDate": "2019", "current": True}, present=label) == f"2019 - {label}"

    def test_open_end_reads_present(self):
        assert format_date_range({"startDate": "2019"}) == "2019 - Present"

    def test_open_end_collapses_to_start(self):
        assert format_date_range({"startDate": "2019"}, open_end_is_present=False) == "2019"

    def test_current_without_dates(self):
        assert format_date_range({"current": True}, present="present") == "present"

    def test_empty_record(self):
        assert format_date_range({}) == ""
        assert format_date_range({"startDate": None, "endDate": None}) == ""


class TestFormatEducationYear:
    def test_number(self):
        assert format_education_year({"year": 2020}, offset=4) == "2016 - 2020"

    def test_numeric_string(self):
        assert format_education_year({"year": "2020"}, offset=1) == "2019 - 2020"

    def test_float_year(self):
        assert format_education_year({"year": 2020.0}, offset=2) == "2018 - 2020"

    def test_range_passes_through(self):
        assert format_education_year({"year": "2012 - 2016"}, offset=3) == "2012 - 2016"

    def test_text_passes_through(self):
        assert format_education_year({"year": "Graduated May 2018"}, offset=2) == "Graduated May 2018"

    def test_missing_uses_fallback(self):
        assert format_education_year({}, offset=2) == ""
        assert format_education_year({"year": ""}, offset=2, fallback="n/a") == "n/a"


class TestSkillLevelDots:
    @pytest.mark.parametrize(
        ("level", "dots"),
        [("Expert", 5), ("Advanced", 4), ("Intermediate", 3), ("Beginner", 2), ("Guru", 3), (None, 3)],
    )
    def test_levels(self, level, dots):
        assert skill_level_dots(level) == dots


class TestTextHelpers:
    def test_technologies_list(self):
        assert format_technologies(["Python", "", "FastAPI"]) == "Python, FastAPI"

    def test_technologies_string(self):
        assert format_technologies("Python, Go") == "Python, Go"

    def test_display_text(self):
        assert display_text(None) == ""
        assert display_text(3) == "3"
        assert display_text(True) == "Yes"
        assert display_text(False) == ""

    def test_is_empty(self):
        assert is_empty(None)
        assert is_empty("   ")
        assert is_empty([])
        assert is_empty(False)
        assert not is_empty(0)
        assert not is_empty("x")
