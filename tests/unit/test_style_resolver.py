"""Unit tests for style presets and their resolution."""

import pytest

from scribe.contexts.structuring import (
    ClassifiedLine,
    CoverLetterRole,
    DocumentType,
    ResumeRole,
    UnsupportedDocumentTypeError,
)
from scribe.contexts.structuring.roles import role_enum_for
from scribe.contexts.styling import (
    DEFAULT_COLORS,
    DEFAULT_RESOLVER,
    RGB,
    Alignment,
    StylePreset,
    StylePresetConfigError,
    StyleResolver,
    UnsupportedRoleError,
    apply_styles,
    resolve_style,
)

ACCENT = DEFAULT_COLORS["accent"]
SECONDARY = DEFAULT_COLORS["secondary"]


class TestDataStructures:
    @pytest.mark.unit
    def test_rgb_hex_round_trip(self):
        assert RGB.from_hex("#1f4e79").hex == "1f4e79"
        assert RGB.from_hex("FFFFFF") == RGB(1.0, 1.0, 1.0)

    @pytest.mark.unit
    @pytest.mark.parametrize("channels", [(1.2, 0, 0), (0, -0.1, 0)])
    def test_rgb_rejects_out_of_range(self, channels):
        with pytest.raises(ValueError):
            RGB(*channels)

    @pytest.mark.unit
    def test_rgb_rejects_short_hex(self):
        with pytest.raises(ValueError):
            RGB.from_hex("fff")

    @pytest.mark.unit
    def test_preset_validation(self):
        with pytest.raises(ValueError):
            StylePreset(font_size_pt=0)
        with pytest.raises(ValueError):
            StylePreset(font_size_pt=10, indent_pt=-1)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"bold": "no"},
            {"underline": "off"},
            {"rule_above": 1},
            {"font_size_pt": "10"},
            {"spacing_after_pt": True},
            {"color": "1f4e79"},
            {"alignment": "left"},
            {"list_marker": 1},
        ],
    )
    def test_preset_rejects_wrong_types(self, kwargs):
        with pytest.raises(TypeError):
            StylePreset(**{"font_size_pt": 10, **kwargs})

    @pytest.mark.unit
    def test_with_overrides_coerces_values(self):
        preset = StylePreset(font_size_pt=10).with_overrides(
            {"color": [1, 0, 0], "alignment": "right", "bold": True}
        )

        assert preset.color == RGB(1.0, 0.0, 0.0)
        assert preset.alignment is Alignment.RIGHT
        assert preset.bold
        assert preset.font_size_pt == 10

    @pytest.mark.unit
    def test_to_dict(self):
        data = resolve_style(ResumeRole.BULLET, DocumentType.RESUME).to_dict()

        assert data["indent_pt"] == 18
        assert data["list_marker"] == "•"
        assert data["alignment"] == "left"
        assert len(data["color"]) == 6


class TestDefaultPresets:
    @pytest.mark.unit
    @pytest.mark.parametrize("doc_type", list(DocumentType))
    def test_every_role_has_a_preset(self, doc_type):
        for role in role_enum_for(doc_type):
            assert isinstance(resolve_style(role, doc_type), StylePreset)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "role, doc_type, size, bold, alignment",
        [
            (ResumeRole.NAME, DocumentType.RESUME, 18, True, Alignment.CENTER),
            (ResumeRole.CONTACT_INFO, DocumentType.RESUME, 10, False, Alignment.CENTER),
            (ResumeRole.SECTION_HEADER, DocumentType.RESUME, 14, True, Alignment.LEFT),
            (ResumeRole.SUB_HEADER, DocumentType.RESUME, 12, True, Alignment.LEFT),
            (ResumeRole.BULLET, DocumentType.RESUME, 10, False, Alignment.LEFT),
            (ResumeRole.BODY, DocumentType.RESUME, 11, False, Alignment.LEFT),
            (CoverLetterRole.TITLE, DocumentType.COVER_LETTER, 16, True, Alignment.CENTER),
            (CoverLetterRole.DATE, DocumentType.COVER_LETTER, 10, False, Alignment.RIGHT),
            (CoverLetterRole.CONTACT_INFO, DocumentType.COVER_LETTER, 10, False, Alignment.CENTER),
            (CoverLetterRole.SALUTATION, DocumentType.COVER_LETTER, 11, False, Alignment.LEFT),
            (CoverLetterRole.CLOSING, DocumentType.COVER_LETTER, 11, False, Alignment.LEFT),
            (CoverLetterRole.PARAGRAPH, DocumentType.COVER_LETTER, 11, False, Alignment.LEFT),
        ],
    )
    def test_default_values(self, role, doc_type, size, bold, alignment):
        preset = resolve_style(role, doc_type)

        assert preset.font_size_pt == size
        assert preset.bold is bold
        assert preset.alignment is alignment

    @pytest.mark.unit
    def test_section_header_decorations(self):
        preset = resolve_style(ResumeRole.SECTION_HEADER, DocumentType.RESUME)

        assert preset.underline
        assert preset.rule_above
        assert preset.color == ACCENT
        assert (preset.spacing_before_pt, preset.spacing_after_pt) == (20, 10)

    @pytest.mark.unit
    def test_secondary_color_for_contact_and_date(self):
        assert resolve_style(ResumeRole.CONTACT_INFO, DocumentType.RESUME).color == SECONDARY
        assert resolve_style(CoverLetterRole.DATE, DocumentType.COVER_LETTER).color == SECONDARY


class TestRoleValidation:
    @pytest.mark.unit
    def test_string_roles(self):
        assert resolve_style("bullet", "resume").indent_pt == 18
        assert resolve_style("salutation", "coverLetter").spacing_before_pt == 10

    @pytest.mark.unit
    def test_role_of_other_document_type(self):
        with pytest.raises(UnsupportedRoleError):
            resolve_style(CoverLetterRole.TITLE, DocumentType.RESUME)

    @pytest.mark.unit
    def test_shared_role_value_is_still_checked_by_type(self):
        """ResumeRole.CONTACT_INFO and CoverLetterRole.CONTACT_INFO share a value but not a table."""
        with pytest.raises(UnsupportedRoleError) as exc_info:
            resolve_style(ResumeRole.CONTACT_INFO, DocumentType.COVER_LETTER)

        assert exc_info.value.doc_type is DocumentType.COVER_LETTER

    @pytest.mark.unit
    def test_unknown_role(self):
        with pytest.raises(UnsupportedRoleError):
            resolve_style("footer", "resume")

    @pytest.mark.unit
    def test_unknown_document_type(self):
        with pytest.raises(UnsupportedDocumentTypeError):
            resolve_style("bullet", "invoice")


class TestOverrides:
    @pytest.mark.unit
    def test_override_changes_only_named_fields(self):
        resolver = StyleResolver({"resume": {"bullet": {"indent_pt": 24}}})

        bullet = resolver.resolve("bullet", "resume")
        assert bullet.indent_pt == 24
        assert bullet.font_size_pt == 10
        assert resolver.resolve("body", "resume") == resolve_style("body", "resume")

    @pytest.mark.unit
    def test_default_table_is_untouched(self):
        StyleResolver({"resume": {"name": {"font_size_pt": 30}}})

        assert DEFAULT_RESOLVER.resolve("name", "resume").font_size_pt == 18

    @pytest.mark.unit
    def test_cover_letter_alias_and_hex_color(self):
        resolver = StyleResolver({"cover_letter": {"date": {"color": "#ff0000", "alignment": "left"}}})

        date = resolver.resolve(CoverLetterRole.DATE, DocumentType.COVER_LETTER)
        assert date.color == RGB(1.0, 0.0, 0.0)
        assert date.alignment is Alignment.LEFT

    @pytest.mark.unit
    def test_presets_for(self):
        presets = StyleResolver().presets_for("coverLetter")

        assert list(presets) == list(CoverLetterRole)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "overrides, key",
        [
            ({"invoice": {"body": {"bold": True}}}, "invoice"),
            ({"resume": {"headline": {"bold": True}}}, "resume.headline"),
            ({"resume": {"title": {"bold": True}}}, "resume.title"),
            ({"resume": {"body": {"font_weight": 700}}}, "resume.body"),
            ({"resume": {"body": {"font_size_pt": 0}}}, "resume.body"),
            ({"resume": {"body": {"color": "zz"}}}, "resume.body"),
            ({"resume": {"body": {"alignment": "justify"}}}, "resume.body"),
            ({"resume": {"body": {"bold": "no"}}}, "resume.body"),
            ({"resume": {"body": ["bold"]}}, "resume.body"),
            ({"resume": ["body"]}, "resume"),
            (["resume"], None),
        ],
    )
    def test_invalid_overrides(self, overrides, key):
        with pytest.raises(StylePresetConfigError) as exc_info:
            StyleResolver(overrides)

        assert exc_info.value.key == key


@pytest.mark.unit
def test_apply_styles_preserves_order():
    classified = [
        ClassifiedLine("JANE DOE", ResumeRole.NAME),
        ClassifiedLine("Built things", ResumeRole.BULLET, source="- Built things"),
        ClassifiedLine("Notes", ResumeRole.BODY),
    ]

    styled = apply_styles(classified, "resume")

    assert [line.text for line in styled] == ["JANE DOE", "Built things", "Notes"]
    assert [line.role for line in styled] == [ResumeRole.NAME, ResumeRole.BULLET, ResumeRole.BODY]
    assert styled[1].style.list_marker == "•"
