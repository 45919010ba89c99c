"""
Loguru sink setup shared by every SCRIBE context.

Contexts only emit messages through their prefixed wrappers
(contexts/{context}/logger.py). Installing sinks is left to entry points:
the render CLI calls setup_logger() through setup_composition_logger() so
each run gets its own log directory with a header describing the run.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Layout warnings (unbreakable words) stand out from errors on the console
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    level_colors: Optional[Dict[str, str]] = None,
    console: bool = True,
) -> Path:
    """
    Send SCRIBE log output to a run directory and, optionally, the terminal.

    Replaces any sinks installed earlier, so calling it twice in one process
    starts a fresh log file instead of writing to both.

    Args:
        context_name: Log file stem (the render CLI passes "compose")
        log_dir: Run directory, created when missing
        extra_provenance: Run details written under the header (document type, config file)
        level_colors: Console colors per level, merged over LEVEL_COLORS
        console: Mirror INFO and above to stderr

    Returns:
        Path of the DEBUG-level log file

    Example:
        log_file = setup_logger(
            "compose",
            Path("outs/logs/render_20261018_091500"),
            extra_provenance={"Document type": "coverLetter"},
            console=False,
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    if console:
        # stdout carries CLI results
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: Optional[Dict[str, object]] = None) -> None:
    """Write a header block identifying the run: invocation, interpreter and extra details."""
    rule = "=" * 80
    logger.info(rule)
    logger.info(f"Invocation: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info(rule)
