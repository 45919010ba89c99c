"""
Styling Context

Responsibilities:
- Defines style presets (size, weight, color, alignment, indent, spacing)
- Resolves (role, document type) to a preset
- Applies preset overrides from configuration

Owns: Presentation attributes of each role
Never: Classifies lines or computes positions
"""

from scribe.contexts.styling.defaults import DEFAULT_COLORS, get_default_presets
from scribe.contexts.styling.exceptions import StylePresetConfigError, UnsupportedRoleError
from scribe.contexts.styling.style_data_structures import RGB, Alignment, StyledLine, StylePreset
from scribe.contexts.styling.style_resolver import (
    DEFAULT_RESOLVER,
    StyleResolver,
    apply_styles,
    resolve_style,
)

__all__ = [
    # Resolution
    "resolve_style",
    "apply_styles",
    "StyleResolver",
    "DEFAULT_RESOLVER",
    "get_default_presets",
    "DEFAULT_COLORS",
    # Data structures
    "StylePreset",
    "StyledLine",
    "RGB",
    "Alignment",
    # Errors
    "UnsupportedRoleError",
    "StylePresetConfigError",
]
