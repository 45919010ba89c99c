"""
Role classification for AI-generated résumé and cover letter text.

Each document type has one ordered rule table. A line gets the role of the
first rule whose predicate matches, and the role enum's default when none
does, so classification is total and never raises for string input.

The only state is the active résumé section, which lives in a
ClassificationState created per call.
"""

from collections import Counter
from dataclasses import dataclass, fields
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from scribe.contexts.structuring.logger import _log_debug
from scribe.contexts.structuring.patterns import (
    CLOSING_PHRASES,
    COVER_LETTER_TITLE_KEYWORDS,
    DATE_PATTERNS,
    RESUME_SECTION_KEYWORDS,
    SALUTATION_KEYWORDS,
    SALUTATION_PREFIX,
    SUB_HEADER_PATTERNS,
    BulletPatterns,
    contains_keyword,
    is_all_caps,
    is_contact_info,
    is_title_case,
    strip_bullet_marker,
    strip_header_colon,
)
from scribe.contexts.structuring.roles import (
    ClassifiedLine,
    CoverLetterRole,
    DocumentType,
    ResumeRole,
    Role,
    role_enum_for,
)
from scribe.utils.text_processing import split_lines


@dataclass(frozen=True)
class ClassificationThresholds:
    """
    Length cutoffs used by the heuristics (characters).

    Attributes:
        section_header_max_length: Keyword lines shorter than this are section headers
        sub_header_max_length: Comma lines shorter than this are sub-headers
        title_max_length: First cover letter line shorter than this is the title
        closing_max_length: Closing phrases only count on lines shorter than this
    """

    section_header_max_length: int = 50
    sub_header_max_length: int = 60
    title_max_length: int = 50
    closing_max_length: int = 30

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{f.name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"{f.name} must be positive, got {value}")


DEFAULT_THRESHOLDS = ClassificationThresholds()


@dataclass
class ClassificationState:
    """Per-call classification state."""

    thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS
    active_section: Optional[str] = None


Predicate = Callable[[str, int, ClassificationState], bool]


@dataclass(frozen=True)
class ClassificationRule:
    """
    One entry of an ordered rule table.

    Attributes:
        role: Role assigned when the predicate matches
        predicate: fn(line, index, state) -> bool
        transform: Optional fn(line) -> stored text
        on_match: Optional fn(line, state) run after a match (e.g., open a section)
    """

    role: Role
    predicate: Predicate
    transform: Optional[Callable[[str], str]] = None
    on_match: Optional[Callable[[str, ClassificationState], None]] = None


# =============================================================================
# RESUME PREDICATES
# =============================================================================


def _is_name(line: str, index: int, state: ClassificationState) -> bool:
    return index == 0 and (is_all_caps(line) or is_title_case(line))


def _is_contact(line: str, index: int, state: ClassificationState) -> bool:
    return is_contact_info(line)


def _is_section_header(line: str, index: int, state: ClassificationState) -> bool:
    if not contains_keyword(line, RESUME_SECTION_KEYWORDS):
        return False
    return (
        len(line) < state.thresholds.section_header_max_length
        or line.endswith(":")
        or is_all_caps(line)
    )


def _open_section(line: str, state: ClassificationState) -> None:
    state.active_section = line.lower()


def _is_sub_header(line: str, index: int, state: ClassificationState) -> bool:
    if state.active_section is None:
        return False
    if any(pattern.search(line) for pattern in SUB_HEADER_PATTERNS):
        return True
    return len(line) < state.thresholds.sub_header_max_length and "," in line


def _is_bullet(line: str, index: int, state: ClassificationState) -> bool:
    return BulletPatterns.MARKER.match(line) is not None


# =============================================================================
# COVER LETTER PREDICATES
# =============================================================================


def _is_title(line: str, index: int, state: ClassificationState) -> bool:
    if index != 0:
        return False
    return (
        contains_keyword(line, COVER_LETTER_TITLE_KEYWORDS)
        or len(line) < state.thresholds.title_max_length
    )


def _is_date(line: str, index: int, state: ClassificationState) -> bool:
    return any(pattern.search(line) for pattern in DATE_PATTERNS)


def _is_salutation(line: str, index: int, state: ClassificationState) -> bool:
    return line.lower().startswith(SALUTATION_PREFIX) or contains_keyword(
        line, SALUTATION_KEYWORDS
    )


def _is_closing(line: str, index: int, state: ClassificationState) -> bool:
    return (
        len(line) < state.thresholds.closing_max_length
        and contains_keyword(line, CLOSING_PHRASES)
    )


# =============================================================================
# RULE TABLES
# =============================================================================

RESUME_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(ResumeRole.NAME, _is_name),
    ClassificationRule(ResumeRole.CONTACT_INFO, _is_contact),
    ClassificationRule(
        ResumeRole.SECTION_HEADER,
        _is_section_header,
        transform=strip_header_colon,
        on_match=_open_section,
    ),
    ClassificationRule(ResumeRole.SUB_HEADER, _is_sub_header),
    ClassificationRule(ResumeRole.BULLET, _is_bullet, transform=strip_bullet_marker),
)

COVER_LETTER_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(CoverLetterRole.TITLE, _is_title),
    ClassificationRule(CoverLetterRole.DATE, _is_date),
    ClassificationRule(CoverLetterRole.CONTACT_INFO, _is_contact),
    ClassificationRule(CoverLetterRole.SALUTATION, _is_salutation),
    ClassificationRule(CoverLetterRole.CLOSING, _is_closing),
)

RULES_BY_DOCUMENT_TYPE: Dict[DocumentType, Tuple[ClassificationRule, ...]] = {
    DocumentType.RESUME: RESUME_RULES,
    DocumentType.COVER_LETTER: COVER_LETTER_RULES,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def classify_line(
    line: str,
    index: int,
    rules: Sequence[ClassificationRule],
    default_role: Role,
    state: ClassificationState,
) -> ClassifiedLine:
    """
    Classify a single line against an ordered rule table.

    Args:
        line: Trimmed, non-empty line
        index: Position of the line in the document
        rules: Ordered rules, first match wins
        default_role: Role used when no rule matches
        state: Per-call state, updated by rules with on_match

    Returns:
        ClassifiedLine for the line
    """
    for rule in rules:
        if rule.predicate(line, index, state):
            if rule.on_match is not None:
                rule.on_match(line, state)
            text = rule.transform(line) if rule.transform is not None else line
            return ClassifiedLine(text=text, role=rule.role, source=line)

    return ClassifiedLine(text=line, role=default_role, source=line)


def classify(
    lines: Sequence[str],
    doc_type: Union[DocumentType, str],
    thresholds: Optional[ClassificationThresholds] = None,
) -> List[ClassifiedLine]:
    """
    Assign a role to every line, preserving order.

    Args:
        lines: Non-empty trimmed lines in reading order
        doc_type: Document type selecting the rule table
        thresholds: Length cutoffs (defaults to DEFAULT_THRESHOLDS)

    Returns:
        One ClassifiedLine per input line, same order

    Raises:
        UnsupportedDocumentTypeError: If doc_type is not a known document type

    Example:
        >>> [c.role.value for c in classify(["JOHN DOE", "john@x.com"], "resume")]
        ['name', 'contact_info']
    """
    doc_type = DocumentType.parse(doc_type)
    rules = RULES_BY_DOCUMENT_TYPE[doc_type]
    default_role = role_enum_for(doc_type).default()
    state = ClassificationState(thresholds=thresholds or DEFAULT_THRESHOLDS)

    classified = [
        classify_line(line, index, rules, default_role, state) for index, line in enumerate(lines)
    ]

    _log_debug(f"Classified {len(classified)} {doc_type.value} lines: {summarize_roles(classified)}")
    return classified


def classify_text(
    raw_text: str,
    doc_type: Union[DocumentType, str],
    thresholds: Optional[ClassificationThresholds] = None,
) -> List[ClassifiedLine]:
    """Split raw text into lines and classify them. Blank input yields []."""
    return classify(split_lines(raw_text), doc_type, thresholds)


def summarize_roles(classified: Sequence[ClassifiedLine]) -> Dict[str, int]:
    """
    Count lines per role, in order of first appearance.

    Args:
        classified: Classified lines

    Returns:
        Mapping of role value to line count
    """
    return dict(Counter(line.role.value for line in classified))
