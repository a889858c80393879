"""
Tests for ocrtex data models.
"""

import pytest

from ocrtex.models import (
    COORDINATE_TOLERANCE,
    BoundingBox,
    DelimiterKind,
    MathFragment,
    RecognizedItem,
    TextSpan,
)


class TestDelimiterKind:
    """Test delimiter marker lookup."""

    @pytest.mark.parametrize(
        "kind,start,end",
        [
            (DelimiterKind.DOLLAR, "$", "$"),
            (DelimiterKind.DOUBLE_DOLLAR, "$$", "$$"),
            (DelimiterKind.BRACKET, "\\[", "\\]"),
            (DelimiterKind.PARENTHESIS, "\\(", "\\)"),
        ],
    )
    def test_markers(self, kind, start, end):
        """Each kind knows its opening and closing marker."""
        assert kind.start == start
        assert kind.end == end


class TestTextSpan:
    """Test TextSpan."""

    def test_frozen(self):
        """Spans are immutable."""
        span = TextSpan("$x$", True)

        with pytest.raises(AttributeError):
            span.text = "y"


class TestBoundingBox:
    """Test BoundingBox helpers."""

    def test_close_to_within_tolerance(self):
        """Small jitter is close."""
        a = BoundingBox(0.1, 0.5, 0.3, 0.05)
        b = BoundingBox(0.101, 0.5015, 0.3, 0.05)

        assert a.close_to(b)

    def test_close_to_outside_tolerance(self):
        """Jitter beyond tolerance is not close."""
        a = BoundingBox(0.1, 0.5, 0.3, 0.05)
        b = BoundingBox(0.1 + 2 * COORDINATE_TOLERANCE, 0.5, 0.3, 0.05)

        assert not a.close_to(b)

    def test_list_round_trip(self):
        """to_list and from_list are inverse."""
        box = BoundingBox(0.1, 0.2, 0.3, 0.4)

        assert BoundingBox.from_list(box.to_list()) == box

    def test_from_list_wrong_length(self):
        """Wrong number of values raises error."""
        with pytest.raises(ValueError):
            BoundingBox.from_list([0.1, 0.2])


class TestMathFragment:
    """Test MathFragment."""

    def test_ids_are_unique(self):
        """Each fragment gets a fresh id."""
        box = BoundingBox(0, 0, 1, 1)

        assert MathFragment("$x$", box).id != MathFragment("$x$", box).id

    def test_matches_ignores_id(self):
        """Frame equality ignores ids."""
        a = MathFragment("$x$", BoundingBox(0.1, 0.5, 0.2, 0.05))
        b = MathFragment("$x$", BoundingBox(0.1005, 0.5, 0.2, 0.05))

        assert a.matches(b)

    def test_matches_requires_same_text(self):
        """Different text never matches."""
        box = BoundingBox(0.1, 0.5, 0.2, 0.05)

        assert not MathFragment("$x$", box).matches(MathFragment("$y$", box))


class TestRecognizedItem:
    """Test RecognizedItem."""

    def test_fragments_stored_as_tuple(self, make_item):
        """Fragment lists are stored as tuples."""
        item = make_item(math="$x$")

        assert isinstance(item.fragments, tuple)
        assert item.has_math

    def test_no_fragments(self, make_item):
        """Item without fragments has no math."""
        assert not make_item().has_math

    def test_matches_ignores_width_jitter(self, make_item):
        """Width is not compared."""
        a = make_item(text="t", x=0.1, y=0.5, width=0.5)
        b = make_item(text="t", x=0.1, y=0.5, width=0.6)

        assert a.matches(b)

    def test_matches_requires_position(self, make_item):
        """Moved item does not match."""
        a = make_item(text="t", y=0.5)
        b = make_item(text="t", y=0.51)

        assert not a.matches(b)

    def test_matches_compares_fragments(self, make_item):
        """Fragments must match pairwise."""
        a = make_item(text="t", math="$x$")
        b = make_item(text="t", math="$y$")
        c = make_item(text="t")

        assert not a.matches(b)
        assert not a.matches(c)

    def test_to_dict(self):
        """Serialized form uses box lists."""
        box = BoundingBox(0.1, 0.2, 0.3, 0.4)
        fragment = MathFragment("$x$", box, id="f1")
        item = RecognizedItem("see $x$", box, [fragment], id="i1")

        assert item.to_dict() == {
            "id": "i1",
            "text": "see $x$",
            "box": [0.1, 0.2, 0.3, 0.4],
            "fragments": [{"id": "f1", "text": "$x$", "box": [0.1, 0.2, 0.3, 0.4]}],
        }
