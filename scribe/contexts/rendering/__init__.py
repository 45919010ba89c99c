"""
Rendering Context

Responsibilities:
- Projects styled lines onto a flowing paragraph stream (structured output)
- Word-wraps and paginates styled lines into positioned runs (paginated output)
- Measures text through injected font metrics
- Diagnoses layout invariants on paginated output

Owns: Both output representations and their geometry
Never: Classifies lines, chooses styles, or writes binary document formats
"""

from scribe.contexts.rendering.font_metrics import (
    DEFAULT_METRICS,
    FontMetrics,
    average_width_metrics,
    reportlab_metrics,
)
from scribe.contexts.rendering.layout_data_structures import (
    Page,
    PageConfig,
    PageSet,
    ParagraphBlock,
    RunKind,
    TextRun,
)
from scribe.contexts.rendering.layout_diagnostics import DocumentDiagnostics, analyze_layout
from scribe.contexts.rendering.paginated_renderer import PaginatedRenderer, to_pages, wrap_words
from scribe.contexts.rendering.structured_renderer import to_paragraphs

__all__ = [
    # Renderers
    "to_paragraphs",
    "to_pages",
    "wrap_words",
    "PaginatedRenderer",
    # Metrics
    "FontMetrics",
    "DEFAULT_METRICS",
    "reportlab_metrics",
    "average_width_metrics",
    # Diagnostics
    "analyze_layout",
    "DocumentDiagnostics",
    # Data structures
    "ParagraphBlock",
    "TextRun",
    "RunKind",
    "Page",
    "PageSet",
    "PageConfig",
]
