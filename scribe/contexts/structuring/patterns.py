"""
Pattern matching constants for line role classification.

Pattern classes follow the project convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns

Keyword lists and length cutoffs are heuristics carried over from the
production generator. They are not tuned; treat them as configuration.
"""

import re
from dataclasses import dataclass

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

_MONTH_PATTERN = "|".join(MONTH_NAMES)


# =============================================================================
# CONTACT INFO PATTERNS (shared by résumés and cover letters)
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for detecting contact information lines.

    A line is contact info if any single pattern matches anywhere in it.
    """

    EMAIL: re.Pattern = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

    # 555-123-4567, 555.123.4567, 5551234567
    PHONE: re.Pattern = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b")

    # "42 Main Street", "7 Elm Ave"
    STREET_ADDRESS: re.Pattern = re.compile(
        r"\b\d{1,5}\s+\w+\s+(?:street|st|avenue|ave|road|rd|drive|dr|lane|ln|boulevard|blvd)\b",
        re.IGNORECASE,
    )

    SOCIAL_PROFILE: re.Pattern = re.compile(r"linkedin\.com|github\.com|portfolio", re.IGNORECASE)


CONTACT_PATTERNS = [
    ContactPatterns.EMAIL,
    ContactPatterns.PHONE,
    ContactPatterns.STREET_ADDRESS,
    ContactPatterns.SOCIAL_PROFILE,
]


# =============================================================================
# RESUME PATTERNS
# =============================================================================

# Substrings that mark a résumé section header (matched against lower-cased line)
RESUME_SECTION_KEYWORDS = (
    "summary",
    "objective",
    "profile",
    "about",
    "experience",
    "employment",
    "work history",
    "career",
    "education",
    "academic",
    "qualifications",
    "skills",
    "competencies",
    "expertise",
    "abilities",
    "projects",
    "portfolio",
    "achievements",
    "certifications",
    "licenses",
    "awards",
    "references",
    "contact",
    "personal",
)


@dataclass(frozen=True)
class SubHeaderPatterns:
    """
    Regex patterns for job titles, employers and date lines under a section.
    """

    MONTH: re.Pattern = re.compile(rf"\b(?:{_MONTH_PATTERN})\b", re.IGNORECASE)

    # "2019 - 2022", "2020–Present"
    YEAR_RANGE: re.Pattern = re.compile(r"\b\d{4}\s*[-–]\s*(?:\d{4}|present)\b", re.IGNORECASE)

    ORGANIZATION: re.Pattern = re.compile(
        r"\b(?:inc|llc|corp|company|university|college|school)\b", re.IGNORECASE
    )


SUB_HEADER_PATTERNS = [
    SubHeaderPatterns.MONTH,
    SubHeaderPatterns.YEAR_RANGE,
    SubHeaderPatterns.ORGANIZATION,
]


@dataclass(frozen=True)
class BulletPatterns:
    """Leading list markers. The marker and its trailing whitespace are stripped."""

    MARKER: re.Pattern = re.compile(r"^[-•*]\s+")


# =============================================================================
# COVER LETTER PATTERNS
# =============================================================================


@dataclass(frozen=True)
class DatePatterns:
    """Regex patterns for letter dates."""

    # "January 1, 2024", "March 15 2025"
    MONTH_DAY_YEAR: re.Pattern = re.compile(
        rf"\b(?:{_MONTH_PATTERN})\s+\d{{1,2}},?\s+\d{{4}}\b", re.IGNORECASE
    )

    # 01/31/2024
    NUMERIC_US: re.Pattern = re.compile(r"\b\d{1,2}/\d{1,2}/\d{4}\b")

    # 2024-01-31
    ISO: re.Pattern = re.compile(r"\b\d{4}-\d{2}-\d{2}\b")


DATE_PATTERNS = [
    DatePatterns.MONTH_DAY_YEAR,
    DatePatterns.NUMERIC_US,
    DatePatterns.ISO,
]

SALUTATION_PREFIX = "dear "
SALUTATION_KEYWORDS = ("hiring manager",)

CLOSING_PHRASES = (
    "sincerely",
    "best regards",
    "regards",
    "thank you",
    "yours truly",
    "respectfully",
    "cordially",
    "best",
    "warmly",
)

COVER_LETTER_TITLE_KEYWORDS = ("cover letter",)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def is_contact_info(line: str) -> bool:
    """
    Check whether a line carries contact details.

    Args:
        line: Trimmed line

    Returns:
        True if an email, phone number, street address or profile link is present
    """
    return any(pattern.search(line) for pattern in CONTACT_PATTERNS)


def is_all_caps(line: str) -> bool:
    """True if the line has cased characters and all of them are upper-case."""
    return line.isupper()


def is_title_case(line: str) -> bool:
    """
    Check whether every word starts upper-case and continues lower-case.

    Words without letters ("III", "2024") follow the same character test, so
    "Jane Doe" and "Jane Doe 2" pass while "Jane doe" and "JaNe Doe" do not.
    A line without any cased character is not title case.

    Args:
        line: Trimmed line

    Returns:
        True if the line is title case
    """
    if not any(char.isalpha() for char in line):
        return False
    for word in line.split():
        if word[0] != word[0].upper() or word[1:] != word[1:].lower():
            return False
    return True


def contains_keyword(line: str, keywords) -> bool:
    """Case-insensitive substring match against any keyword."""
    lowered = line.lower()
    return any(keyword in lowered for keyword in keywords)


def strip_bullet_marker(line: str) -> str:
    """Remove a leading list marker and the whitespace after it."""
    return BulletPatterns.MARKER.sub("", line, count=1)


def strip_header_colon(line: str) -> str:
    """Remove the trailing colon of a section header ('Skills:' -> 'Skills')."""
    return line.rstrip(":").rstrip()
