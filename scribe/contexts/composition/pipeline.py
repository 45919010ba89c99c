"""
Document pipeline: raw generated text -> structured and paginated output.

Runs every stage in order for one document:

    split lines -> classify -> resolve styles -> {paragraphs, pages} -> diagnostics

Each invocation is independent and deterministic. Nothing is returned until
every stage has succeeded, so a failed run never yields partial output.

Examples:
    >>> result = render("JANE DOE\\njane@example.com\\nEXPERIENCE", "resume")
    >>> [p.role.value for p in result.paragraphs]
    ['name', 'contact_info', 'section_header']
    >>> len(result.pages)
    1
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from scribe.contexts.composition.logger import (
    log_render_failure,
    log_render_result,
    log_render_start,
)
from scribe.contexts.rendering.font_metrics import FontMetrics
from scribe.contexts.rendering.layout_data_structures import PageConfig, PageSet, ParagraphBlock
from scribe.contexts.rendering.layout_diagnostics import DocumentDiagnostics, analyze_layout
from scribe.contexts.rendering.logger import log_layout_diagnostics
from scribe.contexts.rendering.paginated_renderer import to_pages
from scribe.contexts.rendering.structured_renderer import to_paragraphs
from scribe.contexts.structuring.classifier import (
    ClassificationThresholds,
    classify,
    summarize_roles,
)
from scribe.contexts.structuring.exceptions import EmptyContentError
from scribe.contexts.structuring.roles import ClassifiedLine, DocumentType
from scribe.contexts.styling.style_resolver import StyleResolver, apply_styles
from scribe.utils.text_processing import split_lines


@dataclass(frozen=True)
class RenderedDocument:
    """
    Everything one pipeline run produced.

    Attributes:
        document_type: Validated document type
        lines: Classifier output, one entry per non-blank input line
        paragraphs: Structured representation
        pages: Paginated representation
        diagnostics: Layout check of the paginated representation
    """

    document_type: DocumentType
    lines: Tuple[ClassifiedLine, ...]
    paragraphs: Tuple[ParagraphBlock, ...]
    pages: PageSet
    diagnostics: DocumentDiagnostics

    @property
    def role_counts(self) -> Dict[str, int]:
        """Role value -> number of lines."""
        return summarize_roles(self.lines)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view of both representations for JSON output."""
        return {
            "document_type": self.document_type.value,
            "roles": self.role_counts,
            "paragraphs": [paragraph.to_dict() for paragraph in self.paragraphs],
            "pages": self.pages.to_dict(),
            "issues": self.diagnostics.get_inherited_issues(),
        }


def render(
    raw_text: str,
    doc_type: Union[DocumentType, str],
    page_config: Optional[PageConfig] = None,
    *,
    metrics: Optional[FontMetrics] = None,
    resolver: Optional[StyleResolver] = None,
    thresholds: Optional[ClassificationThresholds] = None,
) -> RenderedDocument:
    """
    Render raw generated text into both output representations.

    Args:
        raw_text: Plain text of a résumé or cover letter, lines separated by newlines
        doc_type: DocumentType member or value ("resume", "coverLetter")
        page_config: Page geometry (A4, 50pt margins if None)
        metrics: Text width function (Helvetica metrics if None)
        resolver: Style presets (built-in defaults if None)
        thresholds: Classification cutoffs (built-in defaults if None)

    Returns:
        RenderedDocument with classified lines, paragraphs, pages and diagnostics

    Raises:
        UnsupportedDocumentTypeError: If doc_type is not a known document type
        EmptyContentError: If raw_text has no non-blank lines
    """
    # Contract errors surface before any work is done
    doc_type = DocumentType.parse(doc_type)

    raw_text = raw_text or ""
    lines = split_lines(raw_text)
    if not lines:
        error = EmptyContentError(raw_length=len(raw_text))
        log_render_failure(doc_type.value, error)
        raise error

    start_time = time.time()
    log_render_start(doc_type.value, len(raw_text), len(lines))

    classified = classify(lines, doc_type, thresholds)
    styled = apply_styles(classified, doc_type, resolver)
    paragraphs = to_paragraphs(styled)
    pages = to_pages(styled, page_config, metrics)

    diagnostics = analyze_layout(pages, expected_line_count=len(styled))
    log_layout_diagnostics(diagnostics)

    result = RenderedDocument(
        document_type=doc_type,
        lines=tuple(classified),
        paragraphs=tuple(paragraphs),
        pages=pages,
        diagnostics=diagnostics,
    )
    log_render_result(
        doc_type.value,
        result.role_counts,
        len(paragraphs),
        len(pages),
        time.time() - start_time,
    )
    return result


def render_many(
    texts: Iterable[str],
    doc_type: Union[DocumentType, str],
    page_config: Optional[PageConfig] = None,
    *,
    metrics: Optional[FontMetrics] = None,
    resolver: Optional[StyleResolver] = None,
    thresholds: Optional[ClassificationThresholds] = None,
) -> List[RenderedDocument]:
    """
    Render several independent documents of the same type.

    Stops at the first failing document and raises its error.

    Args:
        texts: Raw texts
        doc_type: Document type shared by all texts
        page_config, metrics, resolver, thresholds: As in render()

    Returns:
        One RenderedDocument per text, same order
    """
    doc_type = DocumentType.parse(doc_type)
    return [
        render(
            text,
            doc_type,
            page_config,
            metrics=metrics,
            resolver=resolver,
            thresholds=thresholds,
        )
        for text in texts
    ]
