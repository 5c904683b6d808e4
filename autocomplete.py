#!/usr/bin/env python3
"""
wordtrie autocomplete

Type words and get completions from a dictionary that grows as you add
to it. The dictionary can be seeded from one or more word lists.

Usage:
    python autocomplete.py --dict words.txt
    python autocomplete.py --dict words.txt --complete ca --complete do
"""

from __future__ import annotations

import argparse
import logging

from wordtrie.cli import print_completions, run_cli
from wordtrie.constants import MAX_SUGGESTIONS
from wordtrie.dictionary import Dictionary


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("wordtrie")


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="wordtrie -- prefix autocompletion over a growing dictionary",
    )
    parser.add_argument("--dict", dest="dicts", action="append", default=[],
                        metavar="PATH",
                        help="Word list to seed the dictionary with (repeatable)")
    parser.add_argument("--complete", action="append", default=None,
                        metavar="PREFIX",
                        help="Print completions for PREFIX and exit (repeatable)")
    parser.add_argument("--max-suggestions", type=_non_negative,
                        default=MAX_SUGGESTIONS,
                        help="Suggestions shown per prefix, 0 for all "
                             f"(default {MAX_SUGGESTIONS})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


# Entry point

def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dictionary = Dictionary(args.dicts)
    log.debug("Dictionary ready with %d word(s)", len(dictionary))

    if args.complete is not None:
        print_completions(dictionary, args.complete, args.max_suggestions)
    else:
        run_cli(dictionary, args.max_suggestions)


if __name__ == "__main__":
    main()
