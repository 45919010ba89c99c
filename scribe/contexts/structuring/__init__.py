"""
Structuring Context

Responsibilities:
- Splits raw generated text into trimmed, non-blank lines
- Classifies each line into a semantic role (name, section header, bullet, ...)
- Defines document types and role vocabularies

Owns: Role classification heuristics and their rule tables
Never: Decides presentation (sizes, colors, positions)
"""

from scribe.contexts.structuring.classifier import (
    DEFAULT_THRESHOLDS,
    ClassificationThresholds,
    classify,
    classify_text,
    summarize_roles,
)
from scribe.contexts.structuring.exceptions import (
    EmptyContentError,
    UnsupportedDocumentTypeError,
)
from scribe.contexts.structuring.roles import (
    ClassifiedLine,
    CoverLetterRole,
    DocumentType,
    ResumeRole,
    Role,
)

__all__ = [
    # Classification
    "classify",
    "classify_text",
    "summarize_roles",
    "ClassificationThresholds",
    "DEFAULT_THRESHOLDS",
    # Data structures
    "ClassifiedLine",
    "DocumentType",
    "ResumeRole",
    "CoverLetterRole",
    "Role",
    # Errors
    "EmptyContentError",
    "UnsupportedDocumentTypeError",
]
