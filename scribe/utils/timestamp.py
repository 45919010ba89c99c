"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a sortable directory-name suffix.

    Returns:
        Timestamp like "20261018_142530"

    Example:
        log_dir = LOGS_PATH / f"render_{now()}"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
