"""
Math delimiter detection.

Example:
    >>> from ocrtex.detection import segment_text
    >>> [s.is_math for s in segment_text("First $x$ and second $y$ formula")]
    [False, True, False, True, False]
"""

from ocrtex.detection.delimiters import (
    StartMatch,
    contains_latex,
    find_closing,
    find_next_start,
    is_escaped,
    math_spans,
    merge_adjacent,
    segment_text,
)

__all__ = [
    "contains_latex",
    "segment_text",
    "math_spans",
    "merge_adjacent",
    # Low-level scanning
    "StartMatch",
    "find_next_start",
    "find_closing",
    "is_escaped",
]
