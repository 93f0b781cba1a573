"""
analyze.py — run the ingredient analysis pipeline from the command line.

Usage:
    python scripts/analyze.py "Wheat flour, water, sugar, salt"
    python scripts/analyze.py "..." --goal health-conscious --tone simple --flag-sugar
    python scripts/analyze.py --sample instant-noodles --flag-additives
    python scripts/analyze.py --image label.jpg          # OCR + fusion, then analyse
    python scripts/analyze.py --list-samples

Prints the result as JSON. Exit code 2 when the input is rejected.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

sys.path.insert(0, str(Path(__file__).parent.parent))

from labelwise.schemas.preferences import UserPreferences
from labelwise.services.aggregator import EmptyAnalysisError
from labelwise.services.analysis import analyze
from labelwise.services.signal_fusion import fuse_signals
from labelwise.services.validator import ValidationError
from labelwise.utils.reference_data import SAMPLE_PRODUCTS, SAMPLES_BY_ID

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2

_GOALS = (
    "normal-consumer", "fitness-focused", "health-conscious",
    "medical-sensitivity", "curious-learner",
)
_TONES = ("simple", "balanced", "detailed")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Classify a food ingredient list.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("ingredients", nargs="?", help="Comma-separated ingredient list")
    source.add_argument("--sample", choices=sorted(SAMPLES_BY_ID), help="Analyse a built-in sample")
    source.add_argument("--image", type=Path, help="Scan a package photo")
    source.add_argument("--list-samples", action="store_true", help="List built-in samples and exit")

    parser.add_argument("--goal", choices=_GOALS, default="normal-consumer")
    parser.add_argument("--tone", choices=_TONES, default="balanced")
    parser.add_argument("--flag-sugar", action="store_true", help="Flag high sugar")
    parser.add_argument("--flag-additives", action="store_true", help="Flag artificial additives")
    parser.add_argument("--flag-preservatives", action="store_true", help="Flag preservatives")
    parser.add_argument("--flag-allergens", action="store_true", help="Flag allergens")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline decisions")
    return parser


def _preferences(args: argparse.Namespace) -> UserPreferences:
    return UserPreferences(
        goal=args.goal,
        tone_preference=args.tone,
        flag_high_sugar=args.flag_sugar,
        flag_artificial_additives=args.flag_additives,
        flag_preservatives=args.flag_preservatives,
        flag_allergens=args.flag_allergens,
    )


def _resolve_text(args: argparse.Namespace) -> Optional[str]:
    if args.sample:
        return SAMPLES_BY_ID[args.sample].ingredient_list
    if args.image:
        fusion = asyncio.run(fuse_signals(args.image.read_bytes()))
        logger.info("Image resolved via %s", fusion.source)
        if not fusion.is_food or not fusion.ingredient_text:
            print(f"error: {fusion.reason or 'No ingredients found in image'}", file=sys.stderr)
            return None
        return fusion.ingredient_text
    return args.ingredients


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.list_samples:
        for sample in SAMPLE_PRODUCTS:
            print(f"{sample.id:<18} {sample.name} ({sample.category})")
        return 0

    text = _resolve_text(args)
    if text is None:
        return EXIT_INVALID_INPUT

    try:
        result = analyze(text, _preferences(args))
    except ValidationError as exc:
        print(f"error: {exc.reason}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except EmptyAnalysisError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(json.dumps(result.model_dump(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
