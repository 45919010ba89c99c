"""
Unit tests for word wrapping and pagination.

All tests use average-width metrics (every character is half the font size
wide) so positions can be computed by hand. Default page: 595x842pt, 50pt
margins, 4pt leading -> content width 495pt, first baseline at y=792.
"""

import pytest

from scribe.contexts.rendering import (
    PageConfig,
    PaginatedRenderer,
    RunKind,
    analyze_layout,
    to_pages,
    to_paragraphs,
    wrap_words,
)
from scribe.contexts.structuring import CoverLetterRole, ResumeRole
from scribe.contexts.styling import Alignment, StyledLine, StylePreset, resolve_style

BODY = StylePreset(font_size_pt=11)


def styled(text, role=ResumeRole.BODY, doc_type="resume"):
    return StyledLine(text=text, role=role, style=resolve_style(role, doc_type))


class TestWrapWords:
    @pytest.mark.unit
    def test_greedy_fill(self, measure):
        lines = wrap_words("aa bb cc", 25.0, 10.0, False, measure)

        assert lines == [("aa bb", 25.0), ("cc", 10.0)]

    @pytest.mark.unit
    def test_collapses_whitespace(self, measure):
        lines = wrap_words("  aa \t  bb  ", 100.0, 10.0, False, measure)

        assert [line for line, _ in lines] == ["aa bb"]

    @pytest.mark.unit
    def test_whitespace_only(self, measure):
        assert wrap_words("   ", 100.0, 10.0, False, measure) == []

    @pytest.mark.unit
    def test_overwide_word_stands_alone(self, measure):
        lines = wrap_words("a xxxxxxxxxx b", 20.0, 10.0, False, measure)

        assert [line for line, _ in lines] == ["a", "xxxxxxxxxx", "b"]
        assert lines[1][1] == 50.0


class TestPlacement:
    @pytest.mark.unit
    def test_empty_input_gives_one_empty_page(self, measure):
        page_set = to_pages([], metrics=measure)

        assert len(page_set) == 1
        assert page_set[0].number == 1
        assert page_set[0].runs == ()

    @pytest.mark.unit
    def test_first_line_sits_at_top_margin(self, measure):
        page_set = to_pages([styled("Plain body text")], metrics=measure)

        run = page_set[0].runs[0]
        assert (run.x, run.y) == (50.0, 792.0)
        assert run.kind is RunKind.TEXT
        assert run.width == len("Plain body text") * 5.5

    @pytest.mark.unit
    def test_spacing_between_lines(self, measure):
        """Body line height is 11 + 4; previous spacing_after adds 7.5."""
        page_set = to_pages([styled("one"), styled("two")], metrics=measure)

        assert [run.y for run in page_set[0].runs] == [792.0, 769.5]

    @pytest.mark.unit
    def test_spacing_before_is_skipped_at_page_top(self, measure):
        page_set = to_pages([styled("Sub", ResumeRole.SUB_HEADER)], metrics=measure)

        assert page_set[0].runs[0].y == 792.0

    @pytest.mark.unit
    def test_center_and_right_alignment(self, measure):
        lines = [
            styled("JOHN", ResumeRole.NAME),
            styled("Jan", CoverLetterRole.DATE, "coverLetter"),
        ]

        runs = to_pages(lines, metrics=measure).runs

        assert runs[0].x == (595 - 4 * 9) / 2
        assert runs[1].x == 595 - 50 - 15

    @pytest.mark.unit
    def test_section_header_rule(self, measure):
        """Rule at the cursor across the content width, heading one font size lower."""
        page_set = to_pages([styled("EXPERIENCE", ResumeRole.SECTION_HEADER)], metrics=measure)

        rule, text = page_set[0].runs
        assert rule.kind is RunKind.RULE
        assert (rule.x, rule.y, rule.width) == (50.0, 792.0, 495.0)
        assert text.kind is RunKind.TEXT
        assert text.y == 792.0 - 14

    @pytest.mark.unit
    def test_bullet_marker_in_gutter(self, measure):
        page_set = to_pages([styled("Built things", ResumeRole.BULLET)], metrics=measure)

        marker, text = page_set[0].runs
        assert marker.kind is RunKind.MARKER
        assert marker.text == "•"
        assert marker.y == text.y
        assert marker.x == 50 + 18 - 5 - 5
        assert text.x == 68.0

    @pytest.mark.unit
    def test_marker_only_on_first_wrapped_line(self, measure):
        text = " ".join(["word"] * 40)

        runs = to_pages([styled(text, ResumeRole.BULLET)], metrics=measure).runs

        assert [run.kind for run in runs].count(RunKind.MARKER) == 1
        assert len([run for run in runs if run.kind is RunKind.TEXT]) > 1

    @pytest.mark.unit
    def test_whitespace_only_line_produces_no_runs(self, measure):
        page_set = to_pages([styled("   ")], metrics=measure)

        assert page_set[0].runs == ()


class TestPagination:
    @pytest.mark.unit
    def test_long_line_spans_pages(self, measure):
        """A line taller than a page continues at the top of the next page."""
        line = StyledLine(text=" ".join(["word"] * 3000), role=ResumeRole.BODY, style=BODY)
        config = PageConfig()

        page_set = to_pages([line], config, measure)

        assert len(page_set) >= 2
        assert page_set[1].runs[0].y == config.height_pt - config.margin_pt
        assert [page.number for page in page_set] == list(range(1, len(page_set) + 1))
        assert all(run.line_index == 0 for run in page_set.runs)

    @pytest.mark.unit
    def test_lines_fill_page_before_breaking(self, measure):
        """50 body lines fit between y=792 and the bottom margin (792 - 49 * 15 = 57)."""
        line = StyledLine(text=" ".join(["word"] * 18 * 51), role=ResumeRole.BODY, style=BODY)

        page_set = to_pages([line], metrics=measure)

        assert len(page_set[0].runs) == 50
        assert page_set[0].runs[-1].y == 57.0
        assert len(page_set[1].runs) == 1

    @pytest.mark.unit
    def test_unbreakable_word(self, measure):
        """A 300 character word is emitted whole, wider than the content box."""
        word = "x" * 300
        config = PageConfig()

        page_set = to_pages([StyledLine(text=word, role=ResumeRole.BODY, style=BODY)], config, measure)

        runs = page_set.runs
        assert len(runs) == 1
        assert runs[0].text == word
        assert runs[0].width > config.content_width
        assert runs[0].x == config.margin_pt

    @pytest.mark.unit
    def test_overwide_centered_word_starts_at_left_edge(self, measure):
        style = StylePreset(font_size_pt=11, alignment=Alignment.CENTER)

        run = to_pages([StyledLine("x" * 300, ResumeRole.NAME, style)], metrics=measure).runs[0]

        assert run.x == 50.0

    @pytest.mark.unit
    def test_rule_moves_with_heading_to_next_page(self, measure):
        """A heading whose rule and first line would cross the margin starts the next page."""
        config = PageConfig(width_pt=300, height_pt=160, margin_pt=50)
        lines = [styled("one"), styled("two"), styled("EXPERIENCE", ResumeRole.SECTION_HEADER)]

        page_set = to_pages(lines, config, measure)

        assert len(page_set) == 2
        assert [run.kind for run in page_set[1].runs] == [RunKind.RULE, RunKind.TEXT]
        assert page_set[1].runs[0].y == 110.0


class TestInvariants:
    TEXT = " ".join(
        ["Designed", "and", "operated", "a", "multi-region", "payments", "platform"] * 60
    )

    def _render(self, measure, config=None):
        lines = [
            styled("JANE DOE", ResumeRole.NAME),
            styled("EXPERIENCE", ResumeRole.SECTION_HEADER),
            styled(self.TEXT, ResumeRole.BULLET),
            styled(self.TEXT),
            styled("SKILLS", ResumeRole.SECTION_HEADER),
            styled(self.TEXT),
        ]
        return lines, to_pages(lines, config, measure)

    @pytest.mark.unit
    def test_width_invariant(self, measure):
        _, page_set = self._render(measure)

        for run in page_set.runs:
            if run.kind is RunKind.TEXT:
                assert run.width <= page_set.config.content_width - run.style.indent_pt

    @pytest.mark.unit
    def test_cursor_is_monotonic(self, measure):
        _, page_set = self._render(measure, PageConfig(height_pt=400))

        assert len(page_set) > 1
        for page in page_set:
            ys = [run.y for run in page.runs]
            assert ys == sorted(ys, reverse=True)
            assert all(y >= page_set.config.margin_pt for y in ys)

    @pytest.mark.unit
    def test_order_and_content_preserved(self, measure):
        lines, page_set = self._render(measure, PageConfig(height_pt=400))

        text_runs = [run for run in page_set.runs if run.kind is RunKind.TEXT]
        indices = [run.line_index for run in text_runs]
        assert indices == sorted(indices)
        for index, line in enumerate(lines):
            rendered = " ".join(run.text for run in text_runs if run.line_index == index)
            assert rendered == line.text

    @pytest.mark.unit
    def test_layout_passes_diagnostics(self, measure):
        lines, page_set = self._render(measure, PageConfig(height_pt=400))

        diagnostics = analyze_layout(page_set, expected_line_count=len(lines))

        assert diagnostics.is_valid, diagnostics.get_inherited_issues()

    @pytest.mark.unit
    def test_renderer_is_reusable(self, measure):
        renderer = PaginatedRenderer(metrics=measure)
        lines = [styled("one"), styled("two")]

        assert renderer.render(lines) == renderer.render(lines)


@pytest.mark.unit
def test_to_paragraphs_is_one_to_one():
    lines = [styled("JANE DOE", ResumeRole.NAME), styled("   "), styled("Built", ResumeRole.BULLET)]

    paragraphs = to_paragraphs(lines)

    assert [(p.text, p.role) for p in paragraphs] == [(line.text, line.role) for line in lines]
    assert paragraphs[2].style.indent_pt == 18
    assert paragraphs[0].to_dict()["role"] == "name"


@pytest.mark.unit
def test_page_config_validation():
    with pytest.raises(ValueError):
        PageConfig(width_pt=100, margin_pt=50)
    with pytest.raises(ValueError):
        PageConfig(leading_pt=-1)
    with pytest.raises(TypeError):
        PageConfig(margin_pt="40")

    config = PageConfig()
    assert config.content_width == 495
    assert config.top_y == 792
