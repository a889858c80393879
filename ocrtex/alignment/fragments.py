"""
Build recognized items from raw OCR lines.

The OCR engine yields a line of text and its box. Math spans in the line
are cleaned and attached as fragments, each with the sub-box the engine
reports for its character range, or a proportional slice of the line box
when the engine cannot locate it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ocrtex.config import RepairConfig
from ocrtex.detection.delimiters import contains_latex, segment_text
from ocrtex.models import BoundingBox, MathFragment, RecognizedItem
from ocrtex.normalizers.latex_repair import clean

logger = logging.getLogger(__name__)

# (start, end) character range -> box, or None when unknown
RangeLocator = Callable[[int, int], BoundingBox | None]


def slice_box(box: BoundingBox, start: int, end: int, length: int) -> BoundingBox:
    """Horizontal slice of ``box`` covering characters ``start:end`` of ``length``."""
    if length <= 0:
        return box
    unit = box.width / length
    return BoundingBox(
        x=box.x + unit * start,
        y=box.y,
        width=unit * (end - start),
        height=box.height,
    )


def extract_fragments(
    text: str,
    bounding_box: BoundingBox,
    locate: RangeLocator | None = None,
    config: RepairConfig | None = None,
) -> RecognizedItem:
    """
    Turn one recognized line into a RecognizedItem.

    Args:
        text: Recognized line text.
        bounding_box: Normalized box of the whole line.
        locate: Optional engine callback giving the box of a character range.
        config: Optional repair configuration for the math spans.

    Returns:
        RecognizedItem whose fragments hold the cleaned math spans in order;
        a line without math gets no fragments.
    """
    if not contains_latex(text):
        return RecognizedItem(text=text, bounding_box=bounding_box)

    fragments = []
    offset = 0
    for span in segment_text(text):
        end = offset + len(span.text)
        if span.is_math:
            box = locate(offset, end) if locate is not None else None
            if box is None:
                box = slice_box(bounding_box, offset, end, len(text))
            fragments.append(MathFragment(text=clean(span.text, config), bounding_box=box))
        offset = end

    if fragments:
        logger.debug("Line %r: %d math fragment(s)", text, len(fragments))
    return RecognizedItem(text=text, bounding_box=bounding_box, fragments=fragments)
