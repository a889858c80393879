"""
Pytest configuration and fixtures for ocrtex tests.
"""

from pathlib import Path

import pytest

from ocrtex.models import BoundingBox, MathFragment, RecognizedItem


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_config():
    """Return a default AlignmentConfig for testing."""
    from ocrtex import AlignmentConfig

    return AlignmentConfig()


@pytest.fixture
def make_item():
    """Factory for RecognizedItems with an optional single math fragment."""

    def _make(text="line", x=0.1, y=0.5, math=None, width=0.5, height=0.05):
        box = BoundingBox(x, y, width, height)
        fragments = [MathFragment(text=math, bounding_box=box)] if math is not None else []
        return RecognizedItem(text=text, bounding_box=box, fragments=fragments)

    return _make
