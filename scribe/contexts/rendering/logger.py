"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

from scribe.contexts.rendering.layout_diagnostics import DocumentDiagnostics

CONTEXT_PREFIX = "[render]"


# Wrapper functions with automatic [render] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_layout_diagnostics(diagnostics: DocumentDiagnostics, verbose: bool = False) -> None:
    """
    Log layout diagnostics.

    Unbreakable words are the expected degenerate case and log as warnings;
    any other issue is a layout bug and logs as an error.

    Args:
        diagnostics: Result of analyze_layout()
        verbose: Log every issue instead of the first few
    """
    unbreakable = diagnostics.unbreakable_runs
    if unbreakable:
        _log_warning(f"{len(unbreakable)} unbreakable word(s) exceed the content width")
        limit = len(unbreakable) if verbose else 3
        for run in unbreakable[:limit]:
            for issue in run.get_issues():
                _log_debug(f"  {issue}")
        if len(unbreakable) > limit:
            _log_debug(f"  ... and {len(unbreakable) - limit} more")

    if diagnostics.has_unexpected_issues:
        expected = {issue for run in unbreakable for issue in run.get_issues()}
        unexpected = [issue for issue in diagnostics.get_inherited_issues() if issue not in expected]
        _log_error(f"Layout check found {len(unexpected)} unexpected issue(s)")
        for issue in unexpected[: len(unexpected) if verbose else 5]:
            _log_error(f"  {issue}")
