"""
Document types, semantic roles and classified lines.

Roles are split per document type. Every role enum names its fallback role
through default(), which keeps classification total.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Type, Union

from scribe.contexts.structuring.exceptions import UnsupportedDocumentTypeError


class DocumentType(str, Enum):
    """Kind of document being structured. Selects rule set and style table."""

    RESUME = "resume"
    COVER_LETTER = "coverLetter"

    @classmethod
    def parse(cls, value: Union["DocumentType", str]) -> "DocumentType":
        """
        Resolve a document type from an enum member or a string alias.

        Args:
            value: DocumentType, or one of "resume", "coverLetter",
                "cover_letter", "cover-letter" (case-insensitive)

        Returns:
            Matching DocumentType

        Raises:
            UnsupportedDocumentTypeError: If value names no document type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "").replace("-", "").replace(" ", "")
            if key in _DOCUMENT_TYPE_ALIASES:
                return _DOCUMENT_TYPE_ALIASES[key]
        raise UnsupportedDocumentTypeError(value, supported=[member.value for member in cls])


_DOCUMENT_TYPE_ALIASES = {
    "resume": DocumentType.RESUME,
    "coverletter": DocumentType.COVER_LETTER,
}


class ResumeRole(str, Enum):
    """Semantic roles of résumé lines."""

    NAME = "name"
    CONTACT_INFO = "contact_info"
    SECTION_HEADER = "section_header"
    SUB_HEADER = "sub_header"
    BULLET = "bullet"
    BODY = "body"

    @classmethod
    def default(cls) -> "ResumeRole":
        return cls.BODY


class CoverLetterRole(str, Enum):
    """Semantic roles of cover letter lines."""

    TITLE = "title"
    DATE = "date"
    CONTACT_INFO = "contact_info"
    SALUTATION = "salutation"
    CLOSING = "closing"
    PARAGRAPH = "paragraph"

    @classmethod
    def default(cls) -> "CoverLetterRole":
        return cls.PARAGRAPH


Role = Union[ResumeRole, CoverLetterRole]

ROLES_BY_DOCUMENT_TYPE: Dict[DocumentType, Type[Enum]] = {
    DocumentType.RESUME: ResumeRole,
    DocumentType.COVER_LETTER: CoverLetterRole,
}


def role_enum_for(doc_type: DocumentType) -> Type[Enum]:
    """Return the role enum that applies to a document type."""
    return ROLES_BY_DOCUMENT_TYPE[DocumentType.parse(doc_type)]


@dataclass(frozen=True)
class ClassifiedLine:
    """
    One line of the document with its semantic role.

    Attributes:
        text: Line text as stored for rendering (bullet marker stripped)
        role: Assigned role
        source: Original trimmed line before any stripping
    """

    text: str
    role: Role
    source: str = ""

    def __post_init__(self):
        if not self.source:
            object.__setattr__(self, "source", self.text)
