"""
Keep item identities stable across frames.

A new frame's items are compared against the previous frame's with the
configured coordinate tolerance; an item that is "the same" keeps its old
object (and id) so renderers can skip redrawing it.
"""

from __future__ import annotations

from ocrtex.config import AlignmentConfig
from ocrtex.models import RecognizedItem


def stabilize_items(
    previous: list[RecognizedItem],
    current: list[RecognizedItem],
    config: AlignmentConfig | None = None,
) -> list[RecognizedItem]:
    """
    Reuse previous items that match current ones.

    For each current item, the first previous item that ``matches`` it
    within ``config.coordinate_tolerance`` is kept in its place; otherwise
    the current item is used as is.
    """
    if config is None:
        config = AlignmentConfig()

    tolerance = config.coordinate_tolerance
    stabilized = []
    for item in current:
        existing = next((old for old in previous if old.matches(item, tolerance)), None)
        stabilized.append(existing if existing is not None else item)
    return stabilized


def ids_changed(previous: list[RecognizedItem], stabilized: list[RecognizedItem]) -> bool:
    """Whether the id sequence differs, i.e. a redraw is needed."""
    return [item.id for item in previous] != [item.id for item in stabilized]
