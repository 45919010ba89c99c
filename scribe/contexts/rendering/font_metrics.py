"""
Text width measurement for the paginated renderer.

Metrics are passed into the renderer as a plain callable:

    measure(text, font_size_pt, bold) -> width in points

reportlab_metrics uses the Adobe Font Metrics reportlab ships for the
standard Helvetica faces, which are what PDF writers fall back to.
average_width_metrics is a deterministic approximation that needs no font
data, mainly for tests.
"""

from typing import Callable

from reportlab.pdfbase import pdfmetrics

FontMetrics = Callable[[str, float, bool], float]

REGULAR_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"

# Average glyph advance as a fraction of the font size for Latin text
AVERAGE_WIDTH_FACTOR = 0.5


def reportlab_metrics(text: str, font_size_pt: float, bold: bool = False) -> float:
    """
    Measure text with Helvetica / Helvetica-Bold metrics.

    Args:
        text: Text to measure
        font_size_pt: Font size in points
        bold: Use the bold face

    Returns:
        Advance width in points
    """
    if not text:
        return 0.0
    font_name = BOLD_FONT if bold else REGULAR_FONT
    return float(pdfmetrics.stringWidth(text, font_name, font_size_pt))


def average_width_metrics(factor: float = AVERAGE_WIDTH_FACTOR) -> FontMetrics:
    """
    Build a metrics function where every character is factor * font size wide.

    Bold and regular measure the same.

    Args:
        factor: Character width as a fraction of the font size

    Returns:
        FontMetrics callable

    Example:
        >>> measure = average_width_metrics(0.5)
        >>> measure("abcd", 10.0, False)
        20.0
    """
    if factor <= 0:
        raise ValueError(f"factor must be positive, got {factor}")

    def measure(text: str, font_size_pt: float, bold: bool = False) -> float:
        return len(text) * font_size_pt * factor

    return measure


DEFAULT_METRICS: FontMetrics = reportlab_metrics
