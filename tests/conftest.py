"""Shared fixtures: deterministic font metrics and sample documents."""

import pytest

from scribe.contexts.rendering.font_metrics import average_width_metrics

RESUME_TEXT = """JANE DOE
jane.doe@example.com | 555-123-4567 | linkedin.com/in/janedoe

PROFESSIONAL SUMMARY
Backend engineer with eight years of experience building payment systems.

EXPERIENCE
Senior Engineer, Acme Corp
January 2020 - Present
- Led the migration of the billing platform to event sourcing
- Cut p99 latency of the checkout API by half
* Mentored four engineers through their first on-call rotations

EDUCATION
State University
B.S. Computer Science 2012 - 2016

SKILLS
Python Go PostgreSQL Kafka Kubernetes
"""

COVER_LETTER_TEXT = """Cover Letter
January 1, 2024
Dear Hiring Manager,
I am excited to apply for the Senior Engineer position at Initech.
Over the last eight years I have built and operated payment systems at scale.
Sincerely,
Jane Doe
"""


@pytest.fixture
def measure():
    """Every character is half the font size wide."""
    return average_width_metrics(0.5)


@pytest.fixture
def resume_text():
    return RESUME_TEXT


@pytest.fixture
def cover_letter_text():
    return COVER_LETTER_TEXT
