"""
SCRIBE - Structured Composition of Résumés Into Both Editions

Turns the plain text an AI model produced for a résumé or a cover letter into
two layout representations: a flowing paragraph stream for paragraph-based
document writers and fixed-size pages of positioned text runs for
coordinate-based page writers.

Architecture:
- Structuring Context: Line extraction and semantic role classification
- Styling Context: Role -> style preset resolution
- Rendering Context: Structured (paragraph) and paginated (page/run) layout
- Composition Context: Pipeline orchestration across the other contexts
"""

__version__ = "0.1.0"
