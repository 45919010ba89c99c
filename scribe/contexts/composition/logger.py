"""
Composition context logger.

Provides logging interface for the composition context with automatic [compose] prefix.
All composition modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from scribe.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[compose]"


def setup_composition_logger(log_dir: Path, doc_type: str, console: bool = True) -> Path:
    """
    Setup logger for a composition session.

    Configures loguru with provenance tracking and composition-specific context.

    Args:
        log_dir: Directory for this session
        doc_type: Document type being rendered (for provenance)
        console: Also log to the console

    Returns:
        Path to log file

    Example:
        from scribe.contexts.composition.logger import setup_composition_logger

        log_file = setup_composition_logger(log_dir, doc_type="resume")
    """
    return _setup_logger(
        context_name="compose",
        log_dir=log_dir,
        extra_provenance={"Document type": doc_type},
        console=console,
    )


# Wrapper functions with automatic [compose] prefix


def _log_info(message: str) -> None:
    """Log info message with [compose] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [compose] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [compose] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [compose] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level composition-specific logging helpers


def log_render_start(doc_type: str, raw_length: int, line_count: int) -> None:
    """Log start of a pipeline run."""
    _log_info(f"Rendering {doc_type}: {line_count} lines from {raw_length} characters")


def log_render_result(
    doc_type: str,
    role_counts: dict,
    paragraph_count: int,
    page_count: int,
    elapsed_time: float,
) -> None:
    """
    Log the outcome of a pipeline run.

    Args:
        doc_type: Document type value
        role_counts: Role value -> line count
        paragraph_count: Number of paragraph blocks produced
        page_count: Number of pages produced
        elapsed_time: Time taken in seconds
    """
    _log_success(
        f"{doc_type}: {paragraph_count} paragraphs, {page_count} page(s) ({elapsed_time:.3f}s)"
    )
    _log_debug(f"  Roles: {role_counts}")


def log_render_failure(doc_type: str, error: Exception) -> None:
    """Log a rejected pipeline run."""
    _log_error(f"Failed to render {doc_type}: {error}")
