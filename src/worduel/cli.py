# Area: Shared
"""
worduel.cli — Command-line interface
====================================

Small developer tool around the dictionary and the word matcher.

Usage:
    worduel lookup north                     # Is the word valid?
    worduel lookup 5                         # Draw a random 5-letter word
    worduel match north slide                # Feedback for guess 'slide'
    worduel --dictionary words.json lookup north

The dictionary path can also be set with WORDCLASH_DICTIONARY.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ._dict.dictionary import load_dictionary
from ._dict.queries import ensure_word
from ._dict.wordmatch import match_word
from ._game.render import render_letter
from ._shared.logging_config import log_engine_error, setup_logging
from .config import load_settings
from .errors import WorduelError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="worduel",
        description="Worduel - dictionary and word matching tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  worduel lookup north
  worduel lookup 6
  worduel match north slide
        """,
    )

    parser.add_argument(
        "--dictionary",
        type=str,
        help="Path to a JSON word list (default: $WORDCLASH_DICTIONARY or dictionary.json)",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    lookup = sub.add_parser("lookup", help="Validate a word, or draw one by length")
    lookup.add_argument("word")

    match = sub.add_parser("match", help="Show the feedback a guess gets against a secret")
    match.add_argument("base")
    match.add_argument("word")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    setup_logging(None, logging.DEBUG if args.verbose else logging.WARNING)

    try:
        settings = load_settings(args.config)
        if args.command == "match":
            wmatch = match_word(args.base.lower(), args.word.lower())
            print("".join(render_letter(c, m) for c, m in zip(args.word, wmatch)))
            return 0

        dictionary = load_dictionary(args.dictionary or settings.dictionary_path)
        print(ensure_word(dictionary, args.word, settings))
        return 0
    except WorduelError as e:
        log_engine_error(e, logging.DEBUG)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: cannot load dictionary: {e}", file=sys.stderr)
        return 1
