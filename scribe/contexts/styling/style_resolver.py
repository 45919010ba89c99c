"""
Style resolution: (role, document type) -> StylePreset.

The default table is total over both role enums. A StyleResolver can layer
overrides on top of it (see composition.config_resolver for loading them
from YAML); the overrides are validated up front so resolve() never
encounters a partially valid table.

Examples:
    >>> resolve_style(ResumeRole.NAME, DocumentType.RESUME).font_size_pt
    18

    >>> resolver = StyleResolver({"resume": {"bullet": {"indent_pt": 24}}})
    >>> resolver.resolve("bullet", "resume").indent_pt
    24
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from scribe.contexts.structuring.exceptions import UnsupportedDocumentTypeError
from scribe.contexts.structuring.roles import ClassifiedLine, DocumentType, Role, role_enum_for
from scribe.contexts.styling.defaults import get_default_presets
from scribe.contexts.styling.exceptions import StylePresetConfigError, UnsupportedRoleError
from scribe.contexts.styling.logger import _log_debug, _log_info
from scribe.contexts.styling.style_data_structures import (
    STYLE_PRESET_FIELDS,
    StylePreset,
    StyledLine,
)

# doc type -> role -> field -> value
PresetOverrides = Mapping[str, Mapping[str, Mapping[str, Any]]]


def normalize_role(role: Union[Role, str], doc_type: DocumentType) -> Role:
    """
    Resolve a role member or role value for a document type.

    Args:
        role: Role enum member or its string value (e.g., "section_header")
        doc_type: Document type the role must belong to

    Returns:
        Role member of the document type's role enum

    Raises:
        UnsupportedRoleError: If the role belongs to another document type or is unknown
    """
    role_enum = role_enum_for(doc_type)
    if isinstance(role, role_enum):
        return role
    # Members of the other document type's enum compare equal as strings, reject them first
    if isinstance(role, Enum):
        raise UnsupportedRoleError(role, doc_type)
    try:
        return role_enum(role)
    except ValueError:
        raise UnsupportedRoleError(role, doc_type) from None


def _require_mapping(value: Any, config_path: Optional[Path], key: str) -> None:
    """Reject an override block that is set but is not a mapping."""
    if value is not None and not isinstance(value, Mapping):
        raise StylePresetConfigError(
            f"Expected a mapping, got {type(value).__name__}", config_path, key=key
        )


class StyleResolver:
    """
    Lookup table of style presets with optional overrides.

    Instances are immutable after construction and safe to share between threads.
    """

    def __init__(
        self,
        overrides: Optional[PresetOverrides] = None,
        config_path: Optional[Path] = None,
    ):
        """
        Initialize the resolver.

        Args:
            overrides: Nested mapping {doc_type: {role: {field: value}}}
            config_path: Source file of the overrides, used in error messages

        Raises:
            StylePresetConfigError: If an override names an unknown document type,
                role or field, or sets an invalid value
        """
        self._presets: Dict[Tuple[DocumentType, Role], StylePreset] = get_default_presets()
        if overrides:
            self._apply_overrides(overrides, config_path)

    def _apply_overrides(self, overrides: PresetOverrides, config_path: Optional[Path]) -> None:
        if not isinstance(overrides, Mapping):
            raise StylePresetConfigError(
                f"Style overrides must be a mapping of document types, got {type(overrides).__name__}",
                config_path,
            )

        applied = 0
        for doc_type_key, role_overrides in overrides.items():
            try:
                doc_type = DocumentType.parse(doc_type_key)
            except UnsupportedDocumentTypeError as e:
                raise StylePresetConfigError(str(e), config_path, key=str(doc_type_key)) from e
            _require_mapping(role_overrides, config_path, str(doc_type_key))

            for role_key, fields in (role_overrides or {}).items():
                key = f"{doc_type_key}.{role_key}"
                _require_mapping(fields, config_path, key)
                try:
                    role = normalize_role(role_key, doc_type)
                except UnsupportedRoleError as e:
                    raise StylePresetConfigError(str(e), config_path, key=key) from e

                unknown = sorted(set(fields or {}) - set(STYLE_PRESET_FIELDS))
                if unknown:
                    raise StylePresetConfigError(
                        f"Unknown style field(s) {unknown}. Available fields: {list(STYLE_PRESET_FIELDS)}",
                        config_path,
                        key=key,
                    )

                try:
                    preset = self._presets[(doc_type, role)].with_overrides(fields or {})
                except (TypeError, ValueError) as e:
                    raise StylePresetConfigError(
                        f"Invalid style value: {e}", config_path, key=key
                    ) from e

                self._presets[(doc_type, role)] = preset
                _log_debug(f"Override applied to {key}: {dict(fields or {})}")
                applied += 1

        source = f" from {config_path}" if config_path else ""
        _log_info(f"Applied {applied} style preset override(s){source}")

    def resolve(self, role: Union[Role, str], doc_type: Union[DocumentType, str]) -> StylePreset:
        """
        Look up the preset for a role.

        Args:
            role: Role member or role value
            doc_type: Document type

        Returns:
            StylePreset for the pair

        Raises:
            UnsupportedDocumentTypeError: If doc_type is unknown
            UnsupportedRoleError: If role does not belong to doc_type
        """
        doc_type = DocumentType.parse(doc_type)
        return self._presets[(doc_type, normalize_role(role, doc_type))]

    def presets_for(self, doc_type: Union[DocumentType, str]) -> Dict[Role, StylePreset]:
        """Return role -> preset for one document type, in role declaration order."""
        doc_type = DocumentType.parse(doc_type)
        return {role: self._presets[(doc_type, role)] for role in role_enum_for(doc_type)}

    def apply(
        self,
        classified: Sequence[ClassifiedLine],
        doc_type: Union[DocumentType, str],
    ) -> List[StyledLine]:
        """
        Attach a preset to every classified line, preserving order.

        Args:
            classified: Classifier output
            doc_type: Document type the lines were classified as

        Returns:
            One StyledLine per classified line
        """
        doc_type = DocumentType.parse(doc_type)
        return [
            StyledLine(text=line.text, role=line.role, style=self.resolve(line.role, doc_type))
            for line in classified
        ]


DEFAULT_RESOLVER = StyleResolver()


def resolve_style(role: Union[Role, str], doc_type: Union[DocumentType, str]) -> StylePreset:
    """Look up a preset in the default table. See StyleResolver.resolve()."""
    return DEFAULT_RESOLVER.resolve(role, doc_type)


def apply_styles(
    classified: Sequence[ClassifiedLine],
    doc_type: Union[DocumentType, str],
    resolver: Optional[StyleResolver] = None,
) -> List[StyledLine]:
    """Attach presets to classified lines using resolver (default table if None)."""
    return (resolver or DEFAULT_RESOLVER).apply(classified, doc_type)
