"""
Layout Data Structures

Output representations of the rendering context:
- ParagraphBlock: structured (flowing) representation, no positions
- TextRun / Page / PageSet: paginated representation in PDF coordinates
  (origin bottom-left, y grows upward, units in points)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Tuple

from scribe.contexts.structuring.roles import Role
from scribe.contexts.styling.style_data_structures import StylePreset

# A4 in points
DEFAULT_PAGE_WIDTH_PT = 595.0
DEFAULT_PAGE_HEIGHT_PT = 842.0
DEFAULT_MARGIN_PT = 50.0
DEFAULT_LEADING_PT = 4.0


@dataclass(frozen=True)
class PageConfig:
    """
    Page geometry for the paginated renderer.

    Attributes:
        width_pt: Page width
        height_pt: Page height
        margin_pt: Uniform margin on all four sides
        leading_pt: Extra space added to the font size to get the line height
    """

    width_pt: float = DEFAULT_PAGE_WIDTH_PT
    height_pt: float = DEFAULT_PAGE_HEIGHT_PT
    margin_pt: float = DEFAULT_MARGIN_PT
    leading_pt: float = DEFAULT_LEADING_PT

    def __post_init__(self):
        for name in ("width_pt", "height_pt", "margin_pt", "leading_pt"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be a number, got {value!r}")
        if self.margin_pt < 0 or self.leading_pt < 0:
            raise ValueError("margin_pt and leading_pt must not be negative")
        if self.width_pt <= 2 * self.margin_pt or self.height_pt <= 2 * self.margin_pt:
            raise ValueError(
                f"Margins of {self.margin_pt}pt leave no content area on a "
                f"{self.width_pt}x{self.height_pt}pt page"
            )

    @property
    def content_width(self) -> float:
        """Width between the left and right margins."""
        return self.width_pt - 2 * self.margin_pt

    @property
    def top_y(self) -> float:
        """Baseline of the first line on every page."""
        return self.height_pt - self.margin_pt

    def line_height(self, font_size_pt: float) -> float:
        """Vertical advance of one wrapped line at a font size."""
        return font_size_pt + self.leading_pt


@dataclass(frozen=True)
class ParagraphBlock:
    """
    One paragraph of the structured representation.

    Attributes:
        text: Paragraph text
        style: Style preset the writer maps onto native attributes
        role: Role the paragraph was classified as
    """

    text: str
    style: StylePreset
    role: Role

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "role": self.role.value, "style": self.style.to_dict()}


class RunKind(str, Enum):
    """What a writer should draw for a run."""

    TEXT = "text"
    RULE = "rule"  # zero-height horizontal line, width gives its length
    MARKER = "marker"  # list marker glyph in the indent gutter


@dataclass(frozen=True)
class TextRun:
    """
    One positioned fragment on a page.

    Attributes:
        text: Text to draw (empty for rules)
        x: Left edge in points
        y: Baseline in points (PDF coordinates)
        style: Style preset of the originating line
        kind: Text, rule or marker
        width: Measured text width, or rule length
        line_index: Index of the originating StyledLine
    """

    text: str
    x: float
    y: float
    style: StylePreset
    kind: RunKind = RunKind.TEXT
    width: float = 0.0
    line_index: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "x": round(self.x, 2),
            "y": round(self.y, 2),
            "kind": self.kind.value,
            "width": round(self.width, 2),
            "line_index": self.line_index,
            "style": self.style.to_dict(),
        }


@dataclass(frozen=True)
class Page:
    """
    Single page of the paginated representation.

    Attributes:
        number: Page number (1-indexed)
        runs: Runs in drawing order, top to bottom
    """

    number: int
    runs: Tuple[TextRun, ...] = ()

    @property
    def text_runs(self) -> List[TextRun]:
        """Runs carrying document text (no rules or markers)."""
        return [run for run in self.runs if run.kind == RunKind.TEXT]

    def to_dict(self) -> Dict[str, Any]:
        return {"number": self.number, "runs": [run.to_dict() for run in self.runs]}


@dataclass(frozen=True)
class PageSet:
    """
    Ordered pages plus the geometry used to lay them out.

    Attributes:
        pages: Pages in order, numbered from 1
        config: Page configuration
    """

    pages: Tuple[Page, ...] = ()
    config: PageConfig = field(default_factory=PageConfig)

    def __len__(self) -> int:
        return len(self.pages)

    def __iter__(self) -> Iterator[Page]:
        return iter(self.pages)

    def __getitem__(self, index: int) -> Page:
        return self.pages[index]

    @property
    def runs(self) -> List[TextRun]:
        """All runs across pages in reading order."""
        return [run for page in self.pages for run in page.runs]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": {
                "width_pt": self.config.width_pt,
                "height_pt": self.config.height_pt,
                "margin_pt": self.config.margin_pt,
                "leading_pt": self.config.leading_pt,
            },
            "pages": [page.to_dict() for page in self.pages],
        }
