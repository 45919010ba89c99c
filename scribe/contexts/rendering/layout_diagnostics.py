"""
Layout diagnostics for paginated output.

Checks a PageSet against the layout invariants and reports issues through a
diagnostics hierarchy (document -> page -> run), so callers can log or
surface them without re-deriving geometry.

Detection capabilities:
- Unbreakable overflow: a single word wider than the available width
- Wrap overflow: a multi-word run wider than the available width (a wrapping bug)
- Out-of-box runs: runs left of the page, past its right edge or below the bottom margin
- Cursor order: a run placed above the previous run on the same page
- Reading order: runs whose originating line index goes backwards
- Missing lines: styled lines that produced no text run

Unbreakable overflow is the documented degenerate case and the only issue
expected from the renderer. Everything else indicates a bug.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from scribe.contexts.rendering.layout_data_structures import PageConfig, PageSet, RunKind, TextRun
from scribe.utils.text_processing import truncate_display

# Floating point slack when comparing measured widths and coordinates
TOLERANCE_PT = 0.01


class IssueTemplates:
    """Centralized issue message templates (f-string style)."""

    # Document-level
    LINE_ORDER = "Line {line} on page {page} comes after line {previous}"
    MISSING_LINE = "Line {line} produced no text runs"
    PAGE_NUMBERING = "Page {position} is numbered {number}"

    # Page-level
    CURSOR_MOVED_UP = "Page {page}: run {run} at y={y:.2f} is above the previous run at y={previous:.2f}"

    # Run-level
    UNBREAKABLE_OVERFLOW = (
        "Line {line} on page {page}: unbreakable word '{text}' is {width:.1f}pt wide "
        "(available {limit:.1f}pt)"
    )
    WRAP_OVERFLOW = "Line {line} on page {page}: wrapped run is {width:.1f}pt wide (available {limit:.1f}pt)"
    OUTSIDE_PAGE = "Line {line} on page {page}: {kind} run at ({x:.1f}, {y:.1f}) lies outside the page box"


# =============================================================================
# Diagnostics Hierarchy
# =============================================================================


@dataclass
class Diagnostics:
    """Base class for hierarchical diagnostics."""

    components: List["Diagnostics"] = field(default_factory=list)

    def get_issues(self) -> List[str]:
        """Generate issues for this level based on field values. Override in subclasses."""
        return []

    def get_inherited_issues(self) -> List[str]:
        """Collect issues from this level and all descendants."""
        all_issues = list(self.get_issues())
        for component in self.components:
            all_issues.extend(component.get_inherited_issues())
        return all_issues

    @property
    def is_valid(self) -> bool:
        """True if no issues at this level or any descendant."""
        return len(self.get_inherited_issues()) == 0


@dataclass
class RunDiagnostics(Diagnostics):
    """Diagnostics for a single run that failed a geometric check."""

    page_number: int = 0
    line_index: int = 0
    kind: RunKind = RunKind.TEXT
    text: str = ""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    available_width: float = 0.0
    overflow: bool = False
    outside_page: bool = False

    @property
    def is_unbreakable(self) -> bool:
        """Overflowing run made of a single word."""
        return self.overflow and " " not in self.text.strip()

    def get_issues(self) -> List[str]:
        issues = []
        if self.overflow:
            template = (
                IssueTemplates.UNBREAKABLE_OVERFLOW
                if self.is_unbreakable
                else IssueTemplates.WRAP_OVERFLOW
            )
            issues.append(
                template.format(
                    line=self.line_index,
                    page=self.page_number,
                    text=truncate_display(self.text, 40),
                    width=self.width,
                    limit=self.available_width,
                )
            )
        if self.outside_page:
            issues.append(
                IssueTemplates.OUTSIDE_PAGE.format(
                    line=self.line_index,
                    page=self.page_number,
                    kind=self.kind.value,
                    x=self.x,
                    y=self.y,
                )
            )
        return issues


@dataclass
class PageDiagnostics(Diagnostics):
    """Diagnostics for a single page."""

    page_number: int = 0
    run_count: int = 0
    cursor_violations: List[tuple] = field(default_factory=list)  # (run index, y, previous y)

    def get_issues(self) -> List[str]:
        return [
            IssueTemplates.CURSOR_MOVED_UP.format(page=self.page_number, run=run, y=y, previous=previous)
            for run, y, previous in self.cursor_violations
        ]


@dataclass
class DocumentDiagnostics(Diagnostics):
    """Top-level diagnostics for the entire page set."""

    page_count: int = 0
    expected_line_count: Optional[int] = None
    missing_lines: List[int] = field(default_factory=list)
    order_violations: List[tuple] = field(default_factory=list)  # (line, page, previous line)
    numbering_violations: List[tuple] = field(default_factory=list)  # (position, number)

    def get_issues(self) -> List[str]:
        issues = []
        for position, number in self.numbering_violations:
            issues.append(IssueTemplates.PAGE_NUMBERING.format(position=position, number=number))
        for line, page, previous in self.order_violations:
            issues.append(IssueTemplates.LINE_ORDER.format(line=line, page=page, previous=previous))
        for line in self.missing_lines:
            issues.append(IssueTemplates.MISSING_LINE.format(line=line))
        return issues

    @property
    def run_diagnostics(self) -> List[RunDiagnostics]:
        """All flagged runs across pages."""
        return [run for page in self.components for run in page.components]

    @property
    def unbreakable_runs(self) -> List[RunDiagnostics]:
        """Flagged runs that are the documented single-word overflow case."""
        return [run for run in self.run_diagnostics if run.is_unbreakable and not run.outside_page]

    @property
    def has_unexpected_issues(self) -> bool:
        """True if any issue other than unbreakable overflow was found."""
        expected = len(self.unbreakable_runs)
        return len(self.get_inherited_issues()) > expected


# =============================================================================
# Helper Functions
# =============================================================================


def _check_run(run: TextRun, page_number: int, config: PageConfig) -> Optional[RunDiagnostics]:
    """Return diagnostics for a run that fails a geometric check, else None."""
    available_width = max(config.content_width - run.style.indent_pt, 0.0)

    overflow = run.kind == RunKind.TEXT and run.width > available_width + TOLERANCE_PT
    outside_page = run.x < -TOLERANCE_PT or run.y > config.top_y + TOLERANCE_PT
    if run.kind != RunKind.RULE:
        outside_page = outside_page or run.y < config.margin_pt - TOLERANCE_PT
    # Overflowing runs are expected to stick out to the right; only flag them on the left edge
    if not overflow:
        outside_page = outside_page or run.x + run.width > config.width_pt + TOLERANCE_PT

    if not (overflow or outside_page):
        return None

    return RunDiagnostics(
        page_number=page_number,
        line_index=run.line_index,
        kind=run.kind,
        text=run.text,
        x=run.x,
        y=run.y,
        width=run.width,
        available_width=available_width,
        overflow=overflow,
        outside_page=outside_page,
    )


def analyze_page(page_runs: List[TextRun], page_number: int, config: PageConfig) -> PageDiagnostics:
    """
    Check cursor monotonicity and run geometry on one page.

    Args:
        page_runs: Runs of the page in emission order
        page_number: Page number (1-indexed)
        config: Page geometry the runs were laid out with

    Returns:
        PageDiagnostics with flagged runs as components
    """
    diagnostics = PageDiagnostics(page_number=page_number, run_count=len(page_runs))

    previous_y = None
    for run_index, run in enumerate(page_runs):
        if previous_y is not None and run.y > previous_y + TOLERANCE_PT:
            diagnostics.cursor_violations.append((run_index, run.y, previous_y))
        previous_y = run.y

        run_diagnostics = _check_run(run, page_number, config)
        if run_diagnostics is not None:
            diagnostics.components.append(run_diagnostics)

    return diagnostics


def analyze_layout(page_set: PageSet, expected_line_count: Optional[int] = None) -> DocumentDiagnostics:
    """
    Check a page set against the layout invariants.

    Args:
        page_set: Renderer output
        expected_line_count: Number of styled lines rendered; enables the
            missing-line check when given

    Returns:
        DocumentDiagnostics hierarchy

    Example:
        diagnostics = analyze_layout(page_set, expected_line_count=len(styled_lines))
        for issue in diagnostics.get_inherited_issues():
            print(issue)
    """
    diagnostics = DocumentDiagnostics(
        page_count=len(page_set),
        expected_line_count=expected_line_count,
    )

    seen_lines = set()
    previous_line = None
    for position, page in enumerate(page_set, 1):
        if page.number != position:
            diagnostics.numbering_violations.append((position, page.number))

        diagnostics.components.append(analyze_page(list(page.runs), page.number, page_set.config))

        for run in page.runs:
            if previous_line is not None and run.line_index < previous_line:
                diagnostics.order_violations.append((run.line_index, page.number, previous_line))
            previous_line = run.line_index
        seen_lines.update(run.line_index for run in page.text_runs)

    if expected_line_count is not None:
        diagnostics.missing_lines = [
            line for line in range(expected_line_count) if line not in seen_lines
        ]

    return diagnostics
