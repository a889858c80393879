"""
Escape-aware splitting of text into math and non-math spans.

Four delimiter families are recognized: ``$..$``, ``$$..$$``, ``\\[..\\]``
and ``\\(..\\)``. A marker is escaped when an odd number of backslashes
directly precede it. An opening marker without a closer is kept as
literal text so a stray ``$`` never swallows the rest of the document.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ocrtex.models import DelimiterKind, TextSpan

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Any character that can begin an opening marker
START_PATTERN = re.compile(r"\$|\\[\[(]")

# Fast pre-filter markers
LATEX_MARKERS = ("$", "\\[", "\\(")


# =============================================================================
# DATA STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class StartMatch:
    """An unescaped opening marker."""

    kind: DelimiterKind
    start: int  # Index of the first marker character

    @property
    def content_start(self) -> int:
        return self.start + len(self.kind.start)


# =============================================================================
# SCANNING
# =============================================================================


def contains_latex(text: str) -> bool:
    """Quick check for any potential delimiter. No escape handling."""
    return any(marker in text for marker in LATEX_MARKERS)


def is_escaped(text: str, index: int) -> bool:
    """Whether the character at ``index`` is preceded by an odd run of backslashes."""
    count = 0
    i = index - 1
    while i >= 0 and text[i] == "\\":
        count += 1
        i -= 1
    return count % 2 == 1


def find_next_start(text: str, position: int) -> StartMatch | None:
    """
    Find the earliest unescaped opening marker at or after ``position``.

    A single scan classifies each candidate: ``$$`` is always a double
    dollar, so a ``$`` followed by ``$`` is never reported as a single one.
    """
    match = START_PATTERN.search(text, position)
    while match is not None:
        index = match.start()
        if not is_escaped(text, index):
            if match.group() == "$":
                if text.startswith("$$", index):
                    return StartMatch(DelimiterKind.DOUBLE_DOLLAR, index)
                return StartMatch(DelimiterKind.DOLLAR, index)
            if match.group() == "\\[":
                return StartMatch(DelimiterKind.BRACKET, index)
            return StartMatch(DelimiterKind.PARENTHESIS, index)
        # Escaped: the next marker may begin on the very next character
        match = START_PATTERN.search(text, index + 1)
    return None


def find_closing(text: str, kind: DelimiterKind, position: int) -> int | None:
    """Return the index just past the first unescaped closer at or after ``position``."""
    marker = kind.end
    search_from = position
    while search_from < len(text):
        found = text.find(marker, search_from)
        if found == -1:
            return None
        if is_escaped(text, found):
            search_from = found + len(marker)
            continue
        return found + len(marker)
    return None


def segment_text(text: str) -> list[TextSpan]:
    """
    Split text into math and non-math spans.

    Math spans include their delimiters. Joining the text of all returned
    spans always reproduces the input.

    Example:
        >>> segment_text("Display: $$E = mc^2$$ is famous")
        [TextSpan(text='Display: ', is_math=False),
         TextSpan(text='$$E = mc^2$$', is_math=True),
         TextSpan(text=' is famous', is_math=False)]
    """
    spans: list[TextSpan] = []
    cursor = 0
    length = len(text)

    while cursor < length:
        match = find_next_start(text, cursor)
        if match is None:
            spans.append(TextSpan(text[cursor:], False))
            break

        if match.start > cursor:
            spans.append(TextSpan(text[cursor : match.start], False))

        end = find_closing(text, match.kind, match.content_start)
        if end is not None:
            spans.append(TextSpan(text[match.start : end], True))
            cursor = end
        else:
            # Unterminated: keep only the opening marker as literal text
            spans.append(TextSpan(match.kind.start, False))
            cursor = match.content_start
            logger.debug("Unterminated %s delimiter at %d", match.kind.value, match.start)

    return merge_adjacent(spans)


def merge_adjacent(spans: list[TextSpan]) -> list[TextSpan]:
    """Merge runs of adjacent non-math spans."""
    merged: list[TextSpan] = []
    for span in spans:
        if merged and not merged[-1].is_math and not span.is_math:
            merged[-1] = TextSpan(merged[-1].text + span.text, False)
        else:
            merged.append(span)
    return merged


def math_spans(text: str) -> list[str]:
    """Texts of the math spans in ``text``, in order."""
    return [span.text for span in segment_text(text) if span.is_math]
