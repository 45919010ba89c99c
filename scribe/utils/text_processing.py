"""
Text processing utilities for line extraction and comparison.
"""

import re
from typing import List

# Characters AI models and copy/paste commonly leave in generated text
SPECIAL_CHARS = {
    "\u00a0": " ",  # Non-breaking space
    "\u2009": " ",  # Thin space
    "\u2007": " ",  # Figure space
    "\u200b": "",  # Zero-width space
    "\ufeff": "",  # Byte order mark
    "\u00ad": "",  # Soft hyphen
}

WHITESPACE_PATTERN = re.compile(r"\s+")
LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def clean_special_chars(text: str) -> str:
    """
    Replace invisible or non-standard space characters.

    Args:
        text: Raw text

    Returns:
        Text with special characters replaced by plain equivalents
    """
    for original, replacement in SPECIAL_CHARS.items():
        text = text.replace(original, replacement)
    return text


def split_lines(raw_text: str) -> List[str]:
    """
    Split raw text into trimmed, non-blank lines.

    Handles \\n, \\r\\n and \\r line endings. Order is preserved since reading
    order is meaningful for classification.

    Args:
        raw_text: Text as returned by the generation step

    Returns:
        List of non-empty, whitespace-trimmed lines (may be empty)

    Example:
        >>> split_lines("JOHN DOE\\n\\n  john@x.com  \\r\\n")
        ['JOHN DOE', 'john@x.com']
    """
    if not raw_text:
        return []

    lines = (line.strip() for line in LINE_BREAK_PATTERN.split(clean_special_chars(raw_text)))
    return [line for line in lines if line]


def normalize_whitespace(text: str) -> str:
    """
    Collapse runs of whitespace to single spaces and trim.

    Args:
        text: Text to normalize

    Returns:
        Normalized text
    """
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display, adding ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length (including ellipsis)

    Returns:
        Truncated text with "..." if it exceeded max_len
    """
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
