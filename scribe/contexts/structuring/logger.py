"""
Structuring context logger.

Provides logging interface for the structuring context with automatic [structure] prefix.
All structuring modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[structure]"


def _log_debug(message: str) -> None:
    """Log debug message with [structure] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
