"""
Search component: builds the keyword index and answers "kw1 OR kw2" queries.

Each query is two keywords; results are the top documents containing either
one, ranked by how often the keyword occurs in them.

Usage (from repo root):
    python -m littlesearch.search_cli \
        --docs data/docs.txt \
        --noise data/noisewords.txt
    python -m littlesearch.search_cli --query deep world --show-lists
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .index_builder import LittleSearchEngine
from .posting import Occurrence


def format_occurrences(occurrences: Optional[List[Occurrence]]) -> str:
    if not occurrences:
        return "(none)"
    return " ".join(str(o) for o in occurrences)


def run_query(engine: LittleSearchEngine, kw1: str, kw2: str, show_lists: bool = False) -> None:
    """Answer one two-keyword query and print the result."""
    if show_lists:
        for kw in (kw1, kw2):
            occurrences = engine.index.get_occurrences(kw.lower())
            print(f"Occurrences of {kw!r}: {format_occurrences(occurrences)}")

    results = engine.top_matches(kw1, kw2)
    if results is None:
        print("No documents matched the query.")
        return

    print(f"Top {len(results)} results:")
    for rank, document in enumerate(results, start=1):
        print(f"{rank:2d}. {document}")


def run_search_loop(engine: LittleSearchEngine, show_lists: bool = False) -> None:
    """
    Interactive command-line search loop.
    """
    print(f"Loaded index with {len(engine.index)} keywords.")
    print("Enter two keywords per query (kw1 OR kw2). Empty line or Ctrl+C to exit.")

    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break

        terms = raw_query.split()
        if len(terms) != 2:
            print("Enter exactly two keywords.")
            continue
        run_query(engine, terms[0], terms[1], show_lists=show_lists)


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Two-keyword search CLI.")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("data/docs.txt"),
        help="File listing the document files to index.",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("data/noisewords.txt"),
        help="File listing noise words to exclude.",
    )
    parser.add_argument(
        "--query",
        nargs=2,
        metavar=("KW1", "KW2"),
        default=None,
        help="Answer a single query and exit.",
    )
    parser.add_argument(
        "--show-lists",
        action="store_true",
        help="Print each keyword's occurrence list along with the results.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log indexing progress.")
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    engine = LittleSearchEngine()
    try:
        engine.make_index(args.docs, args.noise)
    except OSError as e:
        print(f"Error: could not build index: {e}")
        sys.exit(1)

    if args.query:
        run_query(engine, args.query[0], args.query[1], show_lists=args.show_lists)
    else:
        run_search_loop(engine, show_lists=args.show_lists)


if __name__ == "__main__":
    main()
