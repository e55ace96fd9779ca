#!/usr/bin/env python3
"""Command line interface for word frequency queries.

Usage:
    # Highest word frequency in raw text
    python -m text_processor --text "The sun shines over the lake" --highest

    # Frequency of one word in a file
    python -m text_processor --file path/to/file.txt --word the

    # Top N words across multiple files
    python -m text_processor --files file1.txt file2.txt --top 10

    # Write the result to a file
    python -m text_processor --file text.txt --top 20 --output top.txt
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import TYPE_CHECKING

from text_processor.analyzer import (
    frequency_for_word,
    highest_frequency,
    most_frequent_n_words,
)
from text_processor.errors import TextAnalyzerError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from text_processor.index import WordFrequency

_logger = logging.getLogger(__name__)


def read_file(filepath: str | Path) -> str:
    """Read text content from a file.

    Args:
        filepath: Path to the file to read.

    Returns:
        The text content of the file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        UnicodeDecodeError: If the file can't be decoded as UTF-8.
    """
    return Path(filepath).read_text(encoding="utf-8")


def read_files(filepaths: Sequence[str | Path]) -> str:
    """Read and concatenate text content from multiple files, one per line."""
    return "\n".join(read_file(filepath) for filepath in filepaths)


def format_results(entries: Sequence[WordFrequency]) -> str:
    """Format top-N results as a table.

    Args:
        entries: Words with their frequencies, already in display order.

    Returns:
        Formatted string table with results.
    """
    if not entries:
        return "No words found in input."

    word_width = max(4, *(len(entry.word) for entry in entries))  # "Word"
    count_width = max(5, *(len(str(entry.frequency)) for entry in entries))

    header = f"{'Word':<{word_width}}  {'Count':>{count_width}}"
    lines = [header, "-" * len(header)]
    lines.extend(
        f"{entry.word:<{word_width}}  {entry.frequency:>{count_width}}"
        for entry in entries
    )
    return "\n".join(lines)


def run_query(text: str, args: argparse.Namespace) -> str:
    """Run the query selected on the command line and render its result."""
    if args.highest:
        return str(highest_frequency(text))
    if args.word is not None:
        return str(frequency_for_word(text, args.word))
    return format_results(most_frequent_n_words(text, args.top))


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the text processor.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = argparse.ArgumentParser(
        description="Calculate word frequencies in text.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("--text", "-t", type=str, help="Raw text to analyze")
    input_group.add_argument(
        "--file", "-f", type=str, help="Path to a file to analyze"
    )
    input_group.add_argument(
        "--files",
        "-F",
        nargs="+",
        type=str,
        help="Paths to multiple files to analyze",
    )

    query_group = parser.add_mutually_exclusive_group(required=True)
    query_group.add_argument(
        "--highest",
        "-H",
        action="store_true",
        help="Print the highest word frequency",
    )
    query_group.add_argument(
        "--word",
        "-w",
        type=str,
        help="Print the frequency of this word (letters a-z, A-Z only)",
    )
    query_group.add_argument(
        "--top",
        "-n",
        type=int,
        help="Print the N most frequent words",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Output file path (default: print to stdout)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        if args.text is not None:
            text = args.text
        elif args.file:
            text = read_file(args.file)
        else:  # args.files
            text = read_files(args.files)
        _logger.info("Read %d characters of input", len(text))

        result = run_query(text, args)

        if args.output:
            Path(args.output).write_text(result + "\n", encoding="utf-8")
            sys.stdout.write(f"Output written to {args.output}\n")
        else:
            sys.stdout.write(result + "\n")

    except TextAnalyzerError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1
    except FileNotFoundError as e:
        sys.stderr.write(f"Error: File not found - {e}\n")
        return 1
    except UnicodeDecodeError as e:
        sys.stderr.write(f"Error: Could not decode file as UTF-8 - {e}\n")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
