"""
Command-line interface for ocrtex.

Usage:
    # Show math / text spans
    python -m ocrtex segment 'First $x$ and second $y$'

    # Clean one OCR'd formula, listing the passes that fired
    python -m ocrtex clean --trace '$\\frac 33}{5}$'

    # Fuse OCR items (YAML or JSON) with a terminal buffer dump
    python -m ocrtex synthesize items.yaml buffer.txt --config settings.yaml
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import yaml

from ocrtex.alignment.synthesizer import synthesize
from ocrtex.config import AlignmentConfig, load_config
from ocrtex.detection.delimiters import segment_text
from ocrtex.exceptions import InputFormatError, OcrTexError
from ocrtex.models import BoundingBox, MathFragment, RecognizedItem
from ocrtex.normalizers.latex_repair import repair

logger = logging.getLogger(__name__)

# Set to "1" to get debug logging without --verbose
DEBUG_ENV_VAR = "OCRTEX_DEBUG"


# =============================================================================
# ITEM LOADING
# =============================================================================


def _fragment_from_dict(data: dict) -> MathFragment:
    kwargs = {"id": str(data["id"])} if "id" in data else {}
    return MathFragment(
        text=str(data["text"]),
        bounding_box=BoundingBox.from_list(data["box"]),
        **kwargs,
    )


def item_from_dict(data: dict) -> RecognizedItem:
    """Build a RecognizedItem from ``{text, box, fragments, id?}``."""
    try:
        kwargs = {"id": str(data["id"])} if "id" in data else {}
        return RecognizedItem(
            text=str(data["text"]),
            bounding_box=BoundingBox.from_list(data["box"]),
            fragments=[_fragment_from_dict(f) for f in data.get("fragments") or ()],
            **kwargs,
        )
    except (KeyError, TypeError, ValueError) as e:
        raise InputFormatError(f"Invalid item {data!r}: {e}") from e


def load_items(path: Path) -> list[RecognizedItem]:
    """Load items from a YAML or JSON list."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise InputFormatError(f"Cannot read items from {path}: {e}") from e

    if not isinstance(data, list):
        raise InputFormatError(f"{path} must contain a list of items")
    return [item_from_dict(entry) for entry in data]


# =============================================================================
# COMMANDS
# =============================================================================


def cmd_segment(args: argparse.Namespace) -> int:
    for span in segment_text(args.text):
        print(f"{'math' if span.is_math else 'text'}\t{span.text!r}")
    return 0


def cmd_clean(args: argparse.Namespace) -> int:
    config = load_config(args.config) if args.config else AlignmentConfig()
    result = repair(args.text, config.repair)
    if args.trace:
        for name, before, after in result.changes_made:
            print(f"{name}: {before!r} -> {after!r}", file=sys.stderr)
    print(result.cleaned_text)
    return 0


def cmd_synthesize(args: argparse.Namespace) -> int:
    config = load_config(args.config) if args.config else AlignmentConfig()
    items = load_items(args.items)
    try:
        buffer = args.buffer.read_text(encoding="utf-8")
    except OSError as e:
        raise InputFormatError(f"Cannot read buffer {args.buffer}: {e}") from e

    fused = synthesize(items, buffer, config)
    json.dump([item.to_dict() for item in fused], sys.stdout, indent=2, ensure_ascii=False)
    print()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ocrtex",
        description="Segment, repair and align OCR-recognized LaTeX",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    segment = subparsers.add_parser("segment", help="Split text into math and text spans")
    segment.add_argument("text", help="Text to segment")
    segment.set_defaults(func=cmd_segment)

    clean = subparsers.add_parser("clean", help="Repair one OCR'd LaTeX span")
    clean.add_argument("text", help="LaTeX span, delimiters included")
    clean.add_argument("--trace", action="store_true", help="Print passes that changed the text")
    clean.add_argument("--config", type=Path, help="YAML config file")
    clean.set_defaults(func=cmd_clean)

    synth = subparsers.add_parser("synthesize", help="Fuse OCR items with a text buffer")
    synth.add_argument("items", type=Path, help="YAML/JSON list of recognized items")
    synth.add_argument("buffer", type=Path, help="Raw terminal buffer text")
    synth.add_argument("--config", type=Path, help="YAML config file")
    synth.set_defaults(func=cmd_synthesize)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    debug = args.verbose or os.environ.get(DEBUG_ENV_VAR) == "1"
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        return args.func(args)
    except OcrTexError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
