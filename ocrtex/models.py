"""
Data models for ocrtex.

Spans come out of the delimiter scanner; fragments and recognized items
describe what the OCR engine saw on screen. Boxes are normalized to the
unit square with the origin at the bottom-left corner.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum

# Tolerance for comparing normalized coordinates between successive frames
COORDINATE_TOLERANCE = 0.002


def _new_id() -> str:
    return str(uuid.uuid4())


class DelimiterKind(Enum):
    """Supported math delimiter pairs."""

    DOLLAR = "dollar"
    DOUBLE_DOLLAR = "double_dollar"
    BRACKET = "bracket"
    PARENTHESIS = "parenthesis"

    @property
    def start(self) -> str:
        return _MARKERS[self][0]

    @property
    def end(self) -> str:
        return _MARKERS[self][1]


_MARKERS = {
    DelimiterKind.DOLLAR: ("$", "$"),
    DelimiterKind.DOUBLE_DOLLAR: ("$$", "$$"),
    DelimiterKind.BRACKET: ("\\[", "\\]"),
    DelimiterKind.PARENTHESIS: ("\\(", "\\)"),
}


@dataclass(frozen=True)
class TextSpan:
    """A run of text that is either math (delimiters included) or not."""

    text: str
    is_math: bool


@dataclass(frozen=True)
class BoundingBox:
    """Normalized rectangle; higher y means higher on screen."""

    x: float
    y: float
    width: float
    height: float

    def close_to(self, other: "BoundingBox", tolerance: float = COORDINATE_TOLERANCE) -> bool:
        """Whether every coordinate differs by less than ``tolerance``."""
        return (
            abs(self.x - other.x) < tolerance
            and abs(self.y - other.y) < tolerance
            and abs(self.width - other.width) < tolerance
            and abs(self.height - other.height) < tolerance
        )

    def to_list(self) -> list[float]:
        return [self.x, self.y, self.width, self.height]

    @classmethod
    def from_list(cls, values) -> "BoundingBox":
        x, y, width, height = (float(v) for v in values)
        return cls(x, y, width, height)


@dataclass(frozen=True)
class MathFragment:
    """Sub-region of a recognized item holding one (cleaned) math span."""

    text: str
    bounding_box: BoundingBox
    id: str = field(default_factory=_new_id)

    def matches(self, other: "MathFragment", tolerance: float = COORDINATE_TOLERANCE) -> bool:
        """Frame-to-frame equality: same text, box within tolerance. Ids are ignored."""
        return self.text == other.text and self.bounding_box.close_to(
            other.bounding_box, tolerance
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "box": self.bounding_box.to_list()}


@dataclass(frozen=True)
class RecognizedItem:
    """One line of recognized text with its math fragments."""

    text: str
    bounding_box: BoundingBox
    fragments: tuple[MathFragment, ...] = ()
    id: str = field(default_factory=_new_id)

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        if not isinstance(self.fragments, tuple):
            object.__setattr__(self, "fragments", tuple(self.fragments))

    @property
    def has_math(self) -> bool:
        return bool(self.fragments)

    def matches(self, other: "RecognizedItem", tolerance: float = COORDINATE_TOLERANCE) -> bool:
        """
        Frame-to-frame equality.

        Texts must be equal, fragments must match pairwise, and the item
        origins must lie within ``tolerance`` of each other. Item sizes are
        not compared since OCR line boxes jitter in width from frame to frame.
        """
        if self.text != other.text or len(self.fragments) != len(other.fragments):
            return False
        if not all(a.matches(b, tolerance) for a, b in zip(self.fragments, other.fragments)):
            return False
        return (
            abs(self.bounding_box.x - other.bounding_box.x) < tolerance
            and abs(self.bounding_box.y - other.bounding_box.y) < tolerance
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "box": self.bounding_box.to_list(),
            "fragments": [f.to_dict() for f in self.fragments],
        }
