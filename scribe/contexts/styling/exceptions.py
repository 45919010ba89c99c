"""Custom exceptions for styling context."""

from pathlib import Path
from typing import Optional


class UnsupportedRoleError(ValueError):
    """
    Exception raised when a role has no preset for the requested document type.

    Raised for roles of the other document type and for unknown values. This is
    a programming error and is never recovered from.

    Attributes:
        role: The rejected role value
        doc_type: Document type the lookup was made for
    """

    def __init__(self, role: object, doc_type: object):
        self.role = role
        self.doc_type = doc_type
        doc_type_value = getattr(doc_type, "value", doc_type)
        super().__init__(f"No style preset for role {role!r} in {doc_type_value} documents")


class StylePresetConfigError(ValueError):
    """
    Exception raised when a style preset override file is invalid.

    Attributes:
        message: Error description
        config_path: Path to the offending YAML file
        key: Dotted key that failed validation (e.g., 'resume.bullet.font_size_pt')
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        key: Optional[str] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.key = key

        parts = [message]
        if key:
            parts.append(f"Key: {key}")
        if config_path:
            parts.append(f"Config: {config_path}")

        super().__init__("\n".join(parts))
