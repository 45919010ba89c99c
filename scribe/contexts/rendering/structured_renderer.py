"""Structured (flowing) representation: one paragraph block per styled line."""

from typing import List, Sequence

from scribe.contexts.rendering.layout_data_structures import ParagraphBlock
from scribe.contexts.styling.style_data_structures import StyledLine


def to_paragraphs(styled_lines: Sequence[StyledLine]) -> List[ParagraphBlock]:
    """
    Project styled lines onto paragraph blocks, one to one and in order.

    Args:
        styled_lines: Styled lines in reading order

    Returns:
        Paragraph blocks for a paragraph-based document writer
    """
    return [ParagraphBlock(text=line.text, style=line.style, role=line.role) for line in styled_lines]
