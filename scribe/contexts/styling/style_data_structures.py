"""
Style Data Structures

Immutable presentation attributes attached to classified lines. Writers map
these onto native attributes (DOCX runs, PDF fonts and colors).
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Union

from scribe.contexts.structuring.roles import Role


class Alignment(str, Enum):
    """Horizontal alignment of a line."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class RGB:
    """
    Color with float channels in [0, 1].

    Attributes:
        r: Red channel
        g: Green channel
        b: Blue channel
    """

    r: float
    g: float
    b: float

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0.0 <= channel <= 1.0:
                raise ValueError(f"RGB channels must be within [0, 1], got {channel}")

    @property
    def hex(self) -> str:
        """Six-digit lowercase hex string without '#' (e.g., '1f4e79')."""
        return "".join(f"{round(channel * 255):02x}" for channel in (self.r, self.g, self.b))

    @classmethod
    def from_hex(cls, value: str) -> "RGB":
        """
        Parse '#1f4e79' or '1f4e79'.

        Raises:
            ValueError: If value is not a six-digit hex color
        """
        digits = value.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected six hex digits, got {value!r}")
        r, g, b = (int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))
        return cls(r, g, b)

    @classmethod
    def coerce(cls, value: Union["RGB", str, Sequence[float]]) -> "RGB":
        """Build an RGB from an RGB, a hex string or an [r, g, b] sequence."""
        if isinstance(value, RGB):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        r, g, b = (float(channel) for channel in value)
        return cls(r, g, b)


@dataclass(frozen=True)
class StylePreset:
    """
    Visual attributes of one role.

    Attributes:
        font_size_pt: Font size in points
        bold: Bold weight
        color: Text color
        alignment: Horizontal alignment
        indent_pt: Left indent in points
        spacing_before_pt: Vertical space before the line
        spacing_after_pt: Vertical space after the line
        underline: Underlined text (paragraph writers draw a bottom border)
        rule_above: Draw a horizontal rule above the line in paginated output
        list_marker: Glyph drawn before the line (bullets), None for no marker
    """

    font_size_pt: float
    bold: bool = False
    color: RGB = RGB(0.2, 0.2, 0.2)
    alignment: Alignment = Alignment.LEFT
    indent_pt: float = 0.0
    spacing_before_pt: float = 0.0
    spacing_after_pt: float = 0.0
    underline: bool = False
    rule_above: bool = False
    list_marker: Optional[str] = None

    def __post_init__(self):
        for name in ("font_size_pt", "indent_pt", "spacing_before_pt", "spacing_after_pt"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be a number, got {value!r}")
        for name in ("bold", "underline", "rule_above"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise TypeError(f"{name} must be true or false, got {value!r}")
        if not isinstance(self.color, RGB):
            raise TypeError(f"color must be an RGB, got {self.color!r}")
        if not isinstance(self.alignment, Alignment):
            raise TypeError(f"alignment must be an Alignment, got {self.alignment!r}")
        if self.list_marker is not None and not isinstance(self.list_marker, str):
            raise TypeError(f"list_marker must be a string, got {self.list_marker!r}")
        if self.font_size_pt <= 0:
            raise ValueError(f"font_size_pt must be positive, got {self.font_size_pt}")
        if min(self.indent_pt, self.spacing_before_pt, self.spacing_after_pt) < 0:
            raise ValueError("indent and spacing values must not be negative")

    def with_overrides(self, overrides: Dict[str, Any]) -> "StylePreset":
        """
        Return a copy with some fields replaced.

        Colors may be given as hex strings or [r, g, b]; alignment as its string value.

        Args:
            overrides: Field name -> new value

        Returns:
            New StylePreset
        """
        values = dict(overrides)
        if "color" in values:
            values["color"] = RGB.coerce(values["color"])
        if "alignment" in values:
            values["alignment"] = Alignment(values["alignment"])
        return replace(self, **values)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view for JSON output."""
        return {
            "font_size_pt": self.font_size_pt,
            "bold": self.bold,
            "color": self.color.hex,
            "alignment": self.alignment.value,
            "indent_pt": self.indent_pt,
            "spacing_before_pt": self.spacing_before_pt,
            "spacing_after_pt": self.spacing_after_pt,
            "underline": self.underline,
            "rule_above": self.rule_above,
            "list_marker": self.list_marker,
        }


STYLE_PRESET_FIELDS = tuple(StylePreset.__dataclass_fields__)


@dataclass(frozen=True)
class StyledLine:
    """
    Classified line with its resolved style. Common input of both renderers.

    Attributes:
        text: Line text
        role: Semantic role
        style: Resolved preset
    """

    text: str
    role: Role
    style: StylePreset
