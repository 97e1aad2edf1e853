"""
Build the keyword index and print index analytics.

Usage:
    python build_index.py --docs data/docs.txt --noise data/noisewords.txt

The docs file lists one document file per line (paths relative to the docs
file); the noise word file lists words to exclude from the index.

Output:
  - Analytics table printed to console
  - Optionally, the index as JSON (--output), keyword -> occurrence list
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable

from littlesearch.index_builder import LittleSearchEngine


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Build keyword index")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("data/docs.txt"),
        help="File listing the document files to index (default: data/docs.txt)",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("data/noisewords.txt"),
        help="Noise word file (default: data/noisewords.txt)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional output path for the index as JSON",
    )
    parser.add_argument("--verbose", action="store_true", help="Log each document loaded")
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    engine = LittleSearchEngine()
    try:
        num_docs = engine.make_index(args.docs, args.noise)
    except OSError as e:
        print(f"Error: could not build index: {e}")
        sys.exit(1)

    if num_docs == 0:
        print(f"No documents listed in {args.docs}.")
        sys.exit(1)

    print("\n" + "=" * 50)
    print("INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {num_docs} |")
    print(f"| Number of unique keywords   | {len(engine.index)} |")
    print(f"| Total occurrences           | {engine.index.total_occurrences()} |")
    print(f"| Noise words                 | {len(engine.noise_words)} |")
    print()
    print("=" * 50)

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(engine.index.to_dict(), f, indent=2, ensure_ascii=False)
        print(f"\nIndex saved to: {args.output}")
    print()


if __name__ == "__main__":
    main()
