"""
ocrtex: repair and align OCR-recognized LaTeX.

This library takes noisy OCR output of text containing LaTeX math,
splits it into math and non-math spans, repairs the predictable ways
OCR mangles LaTeX, and fuses OCR positions with formulas taken from an
authoritative text buffer (such as a terminal scrollback dump).

Example:
    >>> import ocrtex
    >>> ocrtex.segment_text("First $x$ and second $y$ formula")[1]
    TextSpan(text='$x$', is_math=True)
    >>> ocrtex.clean(r"\\ sum")
    '\\\\sum'

    >>> # OCR gives positions, the buffer gives content
    >>> fused = ocrtex.synthesize(ocr_items, terminal_buffer)
"""

from ocrtex.alignment import (
    extract_fragments,
    ids_changed,
    normalize_buffer,
    stabilize_items,
    synthesize,
)
from ocrtex.config import (
    LINE_TOLERANCE,
    AlignmentConfig,
    RepairConfig,
    load_config,
)
from ocrtex.detection import (
    contains_latex,
    math_spans,
    segment_text,
)
from ocrtex.exceptions import (
    ConfigurationError,
    InputFormatError,
    OcrTexError,
)
from ocrtex.models import (
    COORDINATE_TOLERANCE,
    BoundingBox,
    DelimiterKind,
    MathFragment,
    RecognizedItem,
    TextSpan,
)
from ocrtex.normalizers import (
    RepairResult,
    clean,
    find_best_match,
    levenshtein_distance,
    repair,
)

__version__ = "0.1.0"
__all__ = [
    # Detection
    "contains_latex",
    "segment_text",
    "math_spans",
    # Matching
    "levenshtein_distance",
    "find_best_match",
    # Repair
    "clean",
    "repair",
    "RepairResult",
    # Alignment
    "synthesize",
    "normalize_buffer",
    "extract_fragments",
    "stabilize_items",
    "ids_changed",
    # Models
    "TextSpan",
    "DelimiterKind",
    "BoundingBox",
    "MathFragment",
    "RecognizedItem",
    "COORDINATE_TOLERANCE",
    # Configuration
    "RepairConfig",
    "AlignmentConfig",
    "LINE_TOLERANCE",
    "load_config",
    # Exceptions
    "OcrTexError",
    "ConfigurationError",
    "InputFormatError",
]
