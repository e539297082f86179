#!/usr/bin/env python3
"""
triedict

Interactive dictionary and spell checker backed by a 26-way prefix trie.
Words can be inserted, looked up, deleted, listed and counted; a list of
words can be checked for spelling mistakes in one go.
"""

from __future__ import annotations

import argparse
import logging

from triedict.cli import run_cli
from triedict.dictionary import Dictionary

log = logging.getLogger("triedict")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="triedict -- trie-backed dictionary and spell checker",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Path to a word list (one word per line) to start from")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        dictionary = Dictionary(args.words)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Could not read word list %s: %s", args.words, exc)
        raise SystemExit(1)

    run_cli(dictionary)


if __name__ == "__main__":
    main()
