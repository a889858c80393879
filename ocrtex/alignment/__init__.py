"""
Alignment of OCR positions with authoritative text.

- synthesize: slot-fill OCR math candidates with buffer formulas
- extract_fragments: turn one OCR line into an item with math fragments
- stabilize_items: keep ids stable between successive frames

Example:
    >>> from ocrtex.alignment import synthesize
    >>> fused = synthesize(items, "\\x1b[1mresult:\\x1b[0m $x^2$")
"""

from ocrtex.alignment.fragments import (
    extract_fragments,
    slice_box,
)
from ocrtex.alignment.stability import (
    ids_changed,
    stabilize_items,
)
from ocrtex.alignment.synthesizer import (
    normalize_buffer,
    reading_order_key,
    sort_reading_order,
    strip_ansi,
    synthesize,
)

__all__ = [
    # Synthesis
    "synthesize",
    "normalize_buffer",
    "strip_ansi",
    "reading_order_key",
    "sort_reading_order",
    # Fragments
    "extract_fragments",
    "slice_box",
    # Stability
    "stabilize_items",
    "ids_changed",
]
