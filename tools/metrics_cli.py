#!/usr/bin/env python
"""CLI tool to print the full text metrics report for a file."""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import json_utils as json
from config import config
from logging_utils import setup_logging
from text_metrics import InvalidConfigurationError, LimitKind, build_text_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count words, sentences and paragraphs, and grade readability of a text file."
    )
    parser.add_argument("file", help="Path to text file to analyze ('-' reads stdin)")
    parser.add_argument(
        "--top-n", type=int, default=config.DEFAULT_TOP_WORDS,
        help=f"Number of top words to report (default: {config.DEFAULT_TOP_WORDS})",
    )
    parser.add_argument(
        "--wpm", type=int, default=config.DEFAULT_WORDS_PER_MINUTE,
        help=f"Reading speed in words per minute (default: {config.DEFAULT_WORDS_PER_MINUTE})",
    )
    parser.add_argument(
        "--limit-kind", choices=[kind.value for kind in LimitKind],
        help="Unit for overflow detection",
    )
    parser.add_argument("--limit-value", type=int, help="Limit for overflow detection")
    parser.add_argument(
        "--compact", action="store_true", help="Print single-line JSON instead of indented"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging on stderr"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING")

    if (args.limit_kind is None) != (args.limit_value is None):
        parser.error("--limit-kind and --limit-value must be given together")

    if args.file == "-":
        text = sys.stdin.read()
    else:
        file_path = Path(args.file)
        if not file_path.exists():
            print(f"Error: File not found: {args.file}", file=sys.stderr)
            return 1
        text = file_path.read_text(encoding="utf-8")

    try:
        report = build_text_report(
            text,
            top_n=args.top_n,
            words_per_minute=args.wpm,
            limit_kind=args.limit_kind,
            limit_value=args.limit_value,
        )
    except InvalidConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.debug("Analyzed %d characters from %s", len(text), args.file)
    indent = None if args.compact else 2
    print(json.dumps(report.model_dump(mode="json"), indent=indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
