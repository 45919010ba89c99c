"""
Default style presets for SCRIBE documents.

Values come from the production generator's DOCX and PDF writers:
- names/titles largest, bold and centered in the accent color
- section headers bold, accent color, underlined, with extra space before
- contact and date lines small in the secondary color
- bullets indented, not bold
- everything else plain body text
"""

from typing import Dict, Tuple

from scribe.contexts.structuring.roles import CoverLetterRole, DocumentType, ResumeRole, Role
from scribe.contexts.styling.style_data_structures import RGB, Alignment, StylePreset

# Color scheme (dark gray text, muted secondary, blue accent)
DEFAULT_COLORS = {
    "primary": RGB(0.2, 0.2, 0.2),
    "secondary": RGB(0.4, 0.4, 0.4),
    "accent": RGB(0.0, 0.3, 0.6),
}

BULLET_MARKER = "•"

_PRIMARY = DEFAULT_COLORS["primary"]
_SECONDARY = DEFAULT_COLORS["secondary"]
_ACCENT = DEFAULT_COLORS["accent"]

_CONTACT = StylePreset(
    font_size_pt=10,
    color=_SECONDARY,
    alignment=Alignment.CENTER,
    spacing_after_pt=5,
)

RESUME_PRESETS: Dict[ResumeRole, StylePreset] = {
    ResumeRole.NAME: StylePreset(
        font_size_pt=18,
        bold=True,
        color=_ACCENT,
        alignment=Alignment.CENTER,
        spacing_after_pt=10,
    ),
    ResumeRole.CONTACT_INFO: _CONTACT,
    ResumeRole.SECTION_HEADER: StylePreset(
        font_size_pt=14,
        bold=True,
        color=_ACCENT,
        spacing_before_pt=20,
        spacing_after_pt=10,
        underline=True,
        rule_above=True,
    ),
    ResumeRole.SUB_HEADER: StylePreset(
        font_size_pt=12,
        bold=True,
        color=_PRIMARY,
        spacing_before_pt=10,
        spacing_after_pt=5,
    ),
    ResumeRole.BULLET: StylePreset(
        font_size_pt=10,
        color=_PRIMARY,
        indent_pt=18,
        spacing_after_pt=5,
        list_marker=BULLET_MARKER,
    ),
    ResumeRole.BODY: StylePreset(
        font_size_pt=11,
        color=_PRIMARY,
        spacing_after_pt=7.5,
    ),
}

COVER_LETTER_PRESETS: Dict[CoverLetterRole, StylePreset] = {
    CoverLetterRole.TITLE: StylePreset(
        font_size_pt=16,
        bold=True,
        color=_ACCENT,
        alignment=Alignment.CENTER,
        spacing_after_pt=20,
    ),
    CoverLetterRole.DATE: StylePreset(
        font_size_pt=10,
        color=_SECONDARY,
        alignment=Alignment.RIGHT,
        spacing_after_pt=10,
    ),
    CoverLetterRole.CONTACT_INFO: _CONTACT,
    CoverLetterRole.SALUTATION: StylePreset(
        font_size_pt=11,
        color=_PRIMARY,
        spacing_before_pt=10,
        spacing_after_pt=10,
    ),
    CoverLetterRole.CLOSING: StylePreset(
        font_size_pt=11,
        color=_PRIMARY,
        spacing_before_pt=10,
        spacing_after_pt=5,
    ),
    CoverLetterRole.PARAGRAPH: StylePreset(
        font_size_pt=11,
        color=_PRIMARY,
        spacing_after_pt=7.5,
    ),
}

DEFAULT_PRESETS: Dict[DocumentType, Dict[Role, StylePreset]] = {
    DocumentType.RESUME: RESUME_PRESETS,
    DocumentType.COVER_LETTER: COVER_LETTER_PRESETS,
}


def get_default_presets() -> Dict[Tuple[DocumentType, Role], StylePreset]:
    """
    Get the full default preset table keyed by (document type, role).

    Returns:
        New dict; presets themselves are immutable and shared
    """
    return {
        (doc_type, role): preset
        for doc_type, presets in DEFAULT_PRESETS.items()
        for role, preset in presets.items()
    }
