"""Count word frequencies in a text file and print the most common ones."""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from cli_toolkit.application.word_counter import count_words, top_words
from cli_toolkit.config import load_settings
from cli_toolkit.logging_setup import configure_logging


logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="word-count", description=__doc__)
    parser.add_argument("file", help="Text file to read")
    parser.add_argument("-n", "--top", type=int, default=None, help="Number of words to show")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    args = parser.parse_args(argv)
    if args.top is not None and args.top < 1:
        parser.error("--top must be a positive integer")

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level, verbose=args.verbose)
    top_n = args.top if args.top is not None else settings.word_count_top

    print(f"Reading: {args.file}")

    try:
        text = Path(args.file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {args.file}", exc_info=True)
        print(f"Error reading '{args.file}': {e}", file=sys.stderr)
        return 1

    counts = count_words(text)

    if not counts:
        print("No words found in the file.")
        return 0

    ranked = top_words(counts, top_n)
    print(f"\nTop {len(ranked)} words:")
    for rank, (word, count) in enumerate(ranked, start=1):
        print(f"  {rank:>2}. {word:<15} - {count}")

    print(f"\nTotal: {sum(counts.values())} words, {len(counts)} unique")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
