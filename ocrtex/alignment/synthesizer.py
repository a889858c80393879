"""
Fuse OCR items with an authoritative text buffer.

OCR is good at *where* formulas are on screen and bad at *what* they
say; the terminal buffer is the opposite. The synthesizer extracts the
formulas from the buffer (the truth sequence), sorts the OCR items that
carry math into reading order, and fills the i-th slot with the i-th
formula. No content matching is attempted.
"""

from __future__ import annotations

import functools
import logging
import re
import time

from ocrtex.config import AlignmentConfig
from ocrtex.detection.delimiters import math_spans
from ocrtex.models import MathFragment, RecognizedItem
from ocrtex.normalizers.latex_repair import clean

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# ESC [ parameter bytes, intermediate bytes, final byte
ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")

# Glyphs terminals render where OCR expects plain separators
VISUAL_SEPARATORS = (
    ("•", " "),
    ("·", " "),
    ("—", "-"),
)


# =============================================================================
# BUFFER NORMALIZATION
# =============================================================================


def strip_ansi(text: str) -> str:
    """Remove ANSI CSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def normalize_buffer(buffer: str) -> str:
    """Strip escape sequences and map visual separators to plain characters."""
    clean_buffer = strip_ansi(buffer)
    for glyph, replacement in VISUAL_SEPARATORS:
        clean_buffer = clean_buffer.replace(glyph, replacement)
    return clean_buffer


# =============================================================================
# READING ORDER
# =============================================================================


def reading_order_key(line_tolerance: float):
    """
    Sort key for top-to-bottom, left-to-right order.

    Boxes have their origin at the bottom-left, so a higher ``y`` comes
    first. Items whose ``y`` differ by less than ``line_tolerance`` are on
    the same line and ordered by ``x``.
    """

    def compare(a: RecognizedItem, b: RecognizedItem) -> int:
        ya, yb = a.bounding_box.y, b.bounding_box.y
        if abs(ya - yb) < line_tolerance:
            xa, xb = a.bounding_box.x, b.bounding_box.x
            return -1 if xa < xb else (1 if xa > xb else 0)
        return -1 if ya > yb else 1

    return functools.cmp_to_key(compare)


def sort_reading_order(items: list[RecognizedItem], line_tolerance: float) -> list[RecognizedItem]:
    return sorted(items, key=reading_order_key(line_tolerance))


# =============================================================================
# SYNTHESIS
# =============================================================================


def fill_slot(item: RecognizedItem, truth: str, config: AlignmentConfig) -> RecognizedItem:
    """
    Replace a candidate's math with ``truth``, keeping its id and box.

    The single resulting fragment reuses the id of the candidate's first
    fragment so renderers keyed on fragment ids do not flicker.
    """
    fragment = MathFragment(
        text=clean(truth, config.repair),
        bounding_box=item.bounding_box,
        id=item.fragments[0].id,
    )
    return RecognizedItem(
        text=truth,
        bounding_box=item.bounding_box,
        fragments=(fragment,),
        id=item.id,
    )


def synthesize(
    ocr_items: list[RecognizedItem],
    buffer: str,
    config: AlignmentConfig | None = None,
) -> list[RecognizedItem]:
    """
    Overwrite OCR math with buffer formulas by strict slot-filling.

    Args:
        ocr_items: Items from the OCR engine, in any order.
        buffer: Raw terminal buffer text (may contain ANSI sequences).
        config: Optional alignment configuration.

    Returns:
        A new list in the same order as ``ocr_items``. Candidates that got
        a formula carry it (cleaned) as their only fragment; all other
        items are returned untouched.
    """
    if config is None:
        config = AlignmentConfig()

    start_time = time.time()
    truth = math_spans(normalize_buffer(buffer))

    if not truth:
        logger.debug("No formulas found in buffer, keeping OCR text")
        return list(ocr_items)

    order_key = reading_order_key(config.line_tolerance)
    candidate_indices = sorted(
        (index for index, item in enumerate(ocr_items) if item.fragments),
        key=lambda index: order_key(ocr_items[index]),
    )

    match_count = min(len(candidate_indices), len(truth))
    if match_count < len(truth):
        logger.warning(
            "OCR math candidates (%d) < buffer formulas (%d); %d formula(s) dropped",
            len(candidate_indices),
            len(truth),
            len(truth) - match_count,
        )

    results = list(ocr_items)
    for index, formula in zip(candidate_indices, truth):
        results[index] = fill_slot(ocr_items[index], formula, config)

    logger.debug(
        "Synced %d/%d items via sorted slot-filling in %.3fs",
        match_count,
        len(ocr_items),
        time.time() - start_time,
    )
    return results
