"""Unit tests for log sink setup."""

import pytest
from loguru import logger

from scribe.utils.logger import setup_logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


@pytest.mark.unit
def test_setup_logger_writes_run_header(tmp_path):
    log_dir = tmp_path / "render_run"

    log_file = setup_logger(
        "compose", log_dir, extra_provenance={"Document type": "coverLetter"}, console=False
    )
    logger.debug("classified 7 lines")

    assert log_file == log_dir / "compose.log"
    content = log_file.read_text(encoding="utf-8")
    assert "Invocation:" in content
    assert "Document type: coverLetter" in content
    assert "classified 7 lines" in content


@pytest.mark.unit
def test_setup_logger_replaces_previous_sinks(tmp_path):
    first = setup_logger("compose", tmp_path / "first", console=False)
    second = setup_logger("compose", tmp_path / "second", console=False)
    logger.info("second run only")

    assert "second run only" in second.read_text(encoding="utf-8")
    assert "second run only" not in first.read_text(encoding="utf-8")
