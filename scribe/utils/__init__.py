"""
Shared utilities for SCRIBE.

Common functionality used across contexts:
- Logging setup
- Text processing
- Timestamps
"""

from scribe.utils.text_processing import normalize_whitespace, split_lines
from scribe.utils.timestamp import now

__all__ = ["normalize_whitespace", "split_lines", "now"]
