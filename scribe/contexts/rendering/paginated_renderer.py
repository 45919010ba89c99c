"""
Paginated representation: greedy word wrap and page breaking.

Coordinates follow PDF conventions (origin bottom-left, y upward). The
cursor tracks the baseline of the next line; it starts at
height - margin on every page and moves down by font size + leading per
wrapped line. A new page starts whenever the baseline would fall below the
bottom margin, including in the middle of a wrapped line.

A word wider than the available width is emitted on its own, unsplit. It is
the only case where a text run exceeds the content width; layout
diagnostics report it.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from scribe.contexts.rendering.font_metrics import DEFAULT_METRICS, FontMetrics
from scribe.contexts.rendering.layout_data_structures import (
    Page,
    PageConfig,
    PageSet,
    RunKind,
    TextRun,
)
from scribe.contexts.rendering.logger import _log_debug
from scribe.contexts.styling.style_data_structures import Alignment, StyledLine, StylePreset


@dataclass
class LayoutCursor:
    """
    Mutable position while laying out one document.

    Attributes:
        page_number: Current page (1-indexed)
        y: Baseline of the next line
        at_page_top: Nothing has been placed on the current page yet
    """

    page_number: int
    y: float
    at_page_top: bool = True


def wrap_words(
    text: str,
    max_width: float,
    font_size_pt: float,
    bold: bool,
    measure: FontMetrics,
) -> List[Tuple[str, float]]:
    """
    Greedily pack words into lines no wider than max_width.

    Words are split on whitespace and rejoined with single spaces. A word that
    alone exceeds max_width becomes its own line.

    Args:
        text: Text to wrap
        max_width: Available width in points
        font_size_pt: Font size used for measuring
        bold: Measure with the bold face
        measure: Font metrics function

    Returns:
        List of (line text, measured width); empty for whitespace-only text

    Example:
        >>> from scribe.contexts.rendering.font_metrics import average_width_metrics
        >>> measure = average_width_metrics(0.5)
        >>> [line for line, _ in wrap_words("aa bb cc", 25.0, 10.0, False, measure)]
        ['aa bb', 'cc']
    """
    lines: List[Tuple[str, float]] = []
    current = ""
    current_width = 0.0

    for word in text.split():
        candidate = f"{current} {word}" if current else word
        candidate_width = measure(candidate, font_size_pt, bold)

        if current and candidate_width > max_width:
            lines.append((current, current_width))
            current = word
            current_width = measure(word, font_size_pt, bold)
        else:
            current = candidate
            current_width = candidate_width

    if current:
        lines.append((current, current_width))

    return lines


class PaginatedRenderer:
    """Lay styled lines out onto fixed-size pages."""

    def __init__(self, page_config: Optional[PageConfig] = None, metrics: Optional[FontMetrics] = None):
        """
        Args:
            page_config: Page geometry (A4, 50pt margins if None)
            metrics: Text width function (Helvetica metrics if None)
        """
        self.page_config = page_config or PageConfig()
        self.measure = metrics or DEFAULT_METRICS

    # ------------------------------------------------------------------
    # Public API
    def render(self, styled_lines: Sequence[StyledLine]) -> PageSet:
        """
        Lay out styled lines in order.

        Args:
            styled_lines: Styled lines in reading order

        Returns:
            PageSet with at least one page
        """
        config = self.page_config
        cursor = LayoutCursor(page_number=1, y=config.top_y)
        pages: List[List[TextRun]] = [[]]
        previous_spacing_after = 0.0

        for index, line in enumerate(styled_lines):
            style = line.style

            if not cursor.at_page_top:
                cursor.y -= previous_spacing_after + style.spacing_before_pt

            if style.rule_above:
                self._place_rule(index, style, cursor, pages)

            self._place_line(index, line, cursor, pages)
            previous_spacing_after = style.spacing_after_pt

        _log_debug(f"Laid out {len(styled_lines)} lines on {len(pages)} page(s)")
        return PageSet(
            pages=tuple(Page(number=number, runs=tuple(runs)) for number, runs in enumerate(pages, 1)),
            config=config,
        )

    # ------------------------------------------------------------------
    # Placement helpers
    def _start_page(self, cursor: LayoutCursor, pages: List[List[TextRun]], line_index: int) -> None:
        pages.append([])
        cursor.page_number += 1
        cursor.y = self.page_config.top_y
        cursor.at_page_top = True
        _log_debug(f"Page {cursor.page_number} started at line {line_index}")

    def _place_rule(
        self,
        index: int,
        style: StylePreset,
        cursor: LayoutCursor,
        pages: List[List[TextRun]],
    ) -> None:
        """Emit a zero-height rule and drop the cursor below it for the heading."""
        config = self.page_config

        # Keep the rule on the same page as the first line of its heading
        if not cursor.at_page_top and cursor.y - style.font_size_pt < config.margin_pt:
            self._start_page(cursor, pages, index)

        pages[-1].append(
            TextRun(
                text="",
                x=config.margin_pt,
                y=cursor.y,
                style=style,
                kind=RunKind.RULE,
                width=config.content_width,
                line_index=index,
            )
        )
        cursor.y -= style.font_size_pt
        cursor.at_page_top = False

    def _place_line(
        self,
        index: int,
        line: StyledLine,
        cursor: LayoutCursor,
        pages: List[List[TextRun]],
    ) -> None:
        config = self.page_config
        style = line.style
        available_width = max(config.content_width - style.indent_pt, 0.0)
        segments = wrap_words(line.text, available_width, style.font_size_pt, style.bold, self.measure)
        line_height = config.line_height(style.font_size_pt)

        for segment_index, (segment, width) in enumerate(segments):
            if cursor.y < config.margin_pt:
                self._start_page(cursor, pages, index)

            if width > available_width:
                _log_debug(f"Line {index}: unbreakable word of {width:.1f}pt exceeds {available_width:.1f}pt")

            if segment_index == 0 and style.list_marker:
                pages[-1].append(self._marker_run(index, style, cursor.y))

            pages[-1].append(
                TextRun(
                    text=segment,
                    x=self._x_for(width, style),
                    y=cursor.y,
                    style=style,
                    kind=RunKind.TEXT,
                    width=width,
                    line_index=index,
                )
            )
            cursor.y -= line_height
            cursor.at_page_top = False

    def _marker_run(self, index: int, style: StylePreset, y: float) -> TextRun:
        """List marker right-aligned in the indent gutter, one space before the text."""
        config = self.page_config
        marker_width = self.measure(style.list_marker, style.font_size_pt, style.bold)
        gap = self.measure(" ", style.font_size_pt, style.bold)
        x = max(config.margin_pt + style.indent_pt - marker_width - gap, config.margin_pt)
        return TextRun(
            text=style.list_marker,
            x=x,
            y=y,
            style=style,
            kind=RunKind.MARKER,
            width=marker_width,
            line_index=index,
        )

    def _x_for(self, width: float, style: StylePreset) -> float:
        """Left edge of a run from its alignment. Overwide runs start at the left edge."""
        config = self.page_config
        left = config.margin_pt + style.indent_pt

        if style.alignment == Alignment.CENTER:
            x = (config.width_pt - width) / 2
        elif style.alignment == Alignment.RIGHT:
            x = config.width_pt - config.margin_pt - width
        else:
            return left

        return max(x, left) if width > config.content_width - style.indent_pt else x


def to_pages(
    styled_lines: Sequence[StyledLine],
    page_config: Optional[PageConfig] = None,
    metrics: Optional[FontMetrics] = None,
) -> PageSet:
    """
    Lay styled lines out onto pages.

    Args:
        styled_lines: Styled lines in reading order
        page_config: Page geometry (A4, 50pt margins if None)
        metrics: Text width function (Helvetica metrics if None)

    Returns:
        PageSet of positioned runs
    """
    return PaginatedRenderer(page_config, metrics).render(styled_lines)
