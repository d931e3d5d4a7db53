"""Command-line flashcard generator.

Usage:
    quran-flashcards 2:255
    quran-flashcards "Al-Baqarah 255" --json
    python -m quran_flashcards "ya-sin 1" --verbose
    quran-flashcards 112:1 --quiet
"""

import argparse
import json
import logging
import sys

from quran_flashcards._logging import (
    configure_logging,
    disable_logging,
    enable_debug_logging,
)
from quran_flashcards.exceptions import InvalidReferenceError, QuranFlashcardsError
from quran_flashcards.generator import generate
from quran_flashcards.models import AyahCard

EXIT_OK = 0
EXIT_API_ERROR = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quran-flashcards",
        description="Generate vocabulary flashcards for a Quran verse.",
    )
    parser.add_argument(
        "reference",
        nargs="+",
        help='Verse reference, e.g. "2:255" or "Al-Baqarah 255"',
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Disable all logging")
    return parser


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    if quiet:
        disable_logging()
    elif verbose:
        enable_debug_logging()
    else:
        configure_logging(level=logging.WARNING)


def emit(card: AyahCard) -> None:
    data = card.model_dump(mode="json", by_alias=True)
    print(json.dumps(data, ensure_ascii=False, indent=2))


def print_card(card: AyahCard) -> None:
    print(card.label)
    print("=" * 60)
    if card.arabic:
        print(card.arabic)
    if card.translation:
        print(card.translation)
    print()
    for i, flashcard in enumerate(card.flashcards, start=1):
        line = f"{i:>3}. {flashcard.arabic}"
        if flashcard.transliteration:
            line += f"  ({flashcard.transliteration})"
        if flashcard.meaning:
            line += f"  - {flashcard.meaning}"
        print(line)
        if flashcard.audio_url:
            print(f"     🔊 {flashcard.audio_url}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    reference = " ".join(args.reference)
    try:
        card = generate(reference)
    except InvalidReferenceError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except QuranFlashcardsError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return EXIT_API_ERROR

    if args.json:
        emit(card)
    else:
        print_card(card)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
