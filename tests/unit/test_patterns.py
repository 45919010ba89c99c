"""Unit tests for classification patterns and helpers."""

import pytest

from scribe.contexts.structuring.patterns import (
    RESUME_SECTION_KEYWORDS,
    DatePatterns,
    SubHeaderPatterns,
    contains_keyword,
    is_all_caps,
    is_contact_info,
    is_title_case,
    strip_bullet_marker,
    strip_header_colon,
)


class TestContactInfo:
    """Email, phone, street address and profile links."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line",
        [
            "jane.doe@example.com",
            "Phone: 555-123-4567",
            "555.123.4567",
            "5551234567",
            "42 Main Street, Springfield",
            "7 Elm Ave",
            "linkedin.com/in/janedoe",
            "github.com/janedoe",
            "Portfolio: janedoe.dev",
        ],
    )
    def test_detects_contact_details(self, line):
        assert is_contact_info(line)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line",
        [
            "Senior Engineer, Acme Corp",
            "Engineer at Acme, 2020-2022",
            "Reduced costs by 30%",
            "Street smart and dependable",
        ],
    )
    def test_ignores_plain_lines(self, line):
        assert not is_contact_info(line)


class TestCaseHelpers:
    @pytest.mark.unit
    def test_all_caps(self):
        assert is_all_caps("JOHN DOE")
        assert is_all_caps("EXPERIENCE:")
        assert not is_all_caps("John Doe")
        assert not is_all_caps("2024")

    @pytest.mark.unit
    def test_title_case(self):
        assert is_title_case("Jane Doe")
        assert is_title_case("Jane Doe 2")
        assert not is_title_case("Jane doe")
        assert not is_title_case("JaNe Doe")
        assert not is_title_case("12345")


class TestSubHeaderPatterns:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line",
        ["2019 - 2022", "2019-2022", "2020–Present", "2021 - present"],
    )
    def test_year_ranges(self, line):
        assert SubHeaderPatterns.YEAR_RANGE.search(line)

    @pytest.mark.unit
    def test_month_requires_whole_word(self):
        assert SubHeaderPatterns.MONTH.search("March 2021")
        assert not SubHeaderPatterns.MONTH.search("Marches and parades")

    @pytest.mark.unit
    def test_organization_keywords(self):
        assert SubHeaderPatterns.ORGANIZATION.search("Initech Inc")
        assert SubHeaderPatterns.ORGANIZATION.search("State University")
        assert not SubHeaderPatterns.ORGANIZATION.search("Incremental rollout")


class TestDatePatterns:
    @pytest.mark.unit
    def test_letter_dates(self):
        assert DatePatterns.MONTH_DAY_YEAR.search("January 1, 2024")
        assert DatePatterns.MONTH_DAY_YEAR.search("march 15 2025")
        assert DatePatterns.NUMERIC_US.search("01/31/2024")
        assert DatePatterns.ISO.search("2024-01-31")
        assert not DatePatterns.ISO.search("2024-1-31")


@pytest.mark.unit
def test_contains_keyword_is_case_insensitive():
    assert contains_keyword("WORK HISTORY", RESUME_SECTION_KEYWORDS)
    assert contains_keyword("Technical Skills:", RESUME_SECTION_KEYWORDS)
    assert not contains_keyword("Built things", RESUME_SECTION_KEYWORDS)


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, expected",
    [
        ("- Built things", "Built things"),
        ("•   Shipped it", "Shipped it"),
        ("* Led team", "Led team"),
        ("-Built things", "-Built things"),
        ("Built - things", "Built - things"),
    ],
)
def test_strip_bullet_marker(line, expected):
    """Only a leading marker followed by whitespace is removed."""
    assert strip_bullet_marker(line) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, expected",
    [
        ("Skills:", "Skills"),
        ("WORK HISTORY ::", "WORK HISTORY"),
        ("Skills: Python, Go", "Skills: Python, Go"),
    ],
)
def test_strip_header_colon(line, expected):
    assert strip_header_colon(line) == expected
