"""
Copyright (c) 2025. All rights reserved.
"""

"""
Top Words: count word frequencies across text files and report the most common.

Problem: Read a series of files named on the command line, count how many
times each word appears across the whole collection, and print the twenty
words with the highest counts.

Input:
- One or more text files. Files that cannot be opened are reported and skipped.

Output:
- Up to 20 lines on stdout, highest count first
- Format: word count (e.g., "mangoes 3")

Processing Pipeline:
    1. Create the frequency table with the configured size hint
    2. For each file, in order: open it, feed every qualifying word through
       lookup + insert_or_update, close it
    3. Enumerate the table once and fold it into the top-K ranking
    4. Print the ranking

Diagnostics go to stderr through logging, so stdout carries only the ranking.
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, TextIO, Tuple, Union

import psutil

from .configs import (
    DEFAULT_CHUNK_SIZE_KB,
    DEFAULT_SIZE_HINT,
    MAX_WORD,
    MIN_WORD,
    TOP_COUNTS,
    TieBreak,
    WordCountConfig,
)
from .errors import (
    ArgumentError,
    ErrorKind,
    FileSkippedError,
    TableInsertError,
    TopWordsError,
)
from .extractor import extract_words
from .symtab import FrequencyTable
from .topk import select_top_k

logger = logging.getLogger(__name__)

# How main reports each kind of fatal error
FATAL_MESSAGES = {
    ErrorKind.ARGUMENT: "{}",
    ErrorKind.CONFIG: "invalid options: {}",
    ErrorKind.RESOURCE: "could not create frequency table: {}",
    ErrorKind.TABLE_INSERT: "{} - aborting!",
}


@dataclass
class CountSummary:
    """
    Outcome of feeding a list of files into a frequency table.

    files_processed counts every file that was opened, including those in
    failed_files whose read broke off part way. skipped_files holds the
    files that could not be opened at all.
    """
    files_processed: int = 0
    words_counted: int = 0
    skipped_files: List[str] = field(default_factory=list)
    failed_files: List[str] = field(default_factory=list)


def get_memory_usage() -> float:
    """Get current memory usage in MB"""
    process = psutil.Process()
    return process.memory_info().rss / (1024 * 1024)


def count_word(table: FrequencyTable, word: str) -> int:
    """
    Add one occurrence of word to table and return its new count.

    Raises:
        TableInsertError: If the word is new and cannot be stored
    """
    count = table.lookup(word)
    if count is None:
        table.insert_or_update(word, 1)
        logger.debug(f"installing [{word}] with count 1")
        return 1
    table.insert_or_update(word, count + 1)
    logger.debug(f"re-installing [{word}] with count {count + 1}")
    return count + 1


def process_file(
    file_name: Union[str, Path],
    table: FrequencyTable,
    config: WordCountConfig,
) -> int:
    """
    Count every qualifying word of one file into table.

    The file is opened in binary mode, drained and closed before this
    function returns, whatever the outcome.

    Args:
        file_name: Path of the file to read
        table: Frequency table being populated
        config: Word length filter, read size and insert failure policy

    Returns:
        Number of words counted from this file

    Raises:
        FileSkippedError: If the file cannot be opened (nothing counted) or a
            read fails part way (words before the failure stay counted)
        TableInsertError: If a new word cannot be stored and
            config.abort_on_insert_error is set
    """
    try:
        f = open(file_name, "rb")
    except OSError as e:
        raise FileSkippedError(f"could not open {file_name}: ignored.", path=str(file_name)) from e

    counted = 0
    with f:
        try:
            for word in extract_words(
                f, min_word=config.min_word, max_word=config.max_word, chunk_size=config.chunk_size
            ):
                try:
                    count_word(table, word)
                except TableInsertError as e:
                    if config.abort_on_insert_error:
                        raise
                    logger.warning(f"{e}: dropping one occurrence of [{e.word}]")
                    continue
                counted += 1
        except OSError as e:
            raise FileSkippedError(
                f"error reading {file_name} after {counted} words: {e}; rest of file ignored.",
                path=str(file_name),
                kind=ErrorKind.FILE_READ,
                words_counted=counted,
            ) from e
    return counted


def count_words(
    file_names: Iterable[Union[str, Path]],
    table: FrequencyTable,
    config: WordCountConfig,
) -> CountSummary:
    """
    Process files one after another into table.

    Files that cannot be opened or read are logged as warnings and skipped.
    Fatal errors propagate, so a failed insert stops processing by raising
    TableInsertError unless config.abort_on_insert_error is False.

    Returns:
        CountSummary with per-run totals
    """
    summary = CountSummary()
    for file_name in file_names:
        start_time = time.time()
        try:
            counted = process_file(file_name, table, config)
        except TopWordsError as e:
            if e.fatal:
                raise
            logger.warning(str(e))
            if e.kind is ErrorKind.FILE_OPEN:
                summary.skipped_files.append(e.path)
                continue
            summary.failed_files.append(e.path)
            counted = e.words_counted
        end_time = time.time() - start_time
        summary.files_processed += 1
        summary.words_counted += counted
        logger.info(f"Processing {file_name} took {end_time:.4f} seconds ({counted} words)")
    return summary


def format_ranking(ranking: Sequence[Tuple[str, int]]) -> List[str]:
    """Render ranking entries as "<word> <count>" lines."""
    return [f"{word} {count}" for word, count in ranking]


def run(
    file_names: Sequence[Union[str, Path]],
    config: WordCountConfig,
    out: Optional[TextIO] = None,
) -> List[Tuple[str, int]]:
    """
    Count words across file_names and print the ranking to out (stdout by default).

    Raises:
        TableCreationError: If the frequency table cannot be created
        TableInsertError: If an insert fails and the policy is fatal
    """
    table = FrequencyTable(config.size_hint, max_load_factor=config.max_load_factor)

    start_time = time.time()
    summary = count_words(file_names, table, config)
    stats = table.stats()
    logger.info(
        f"Counted {summary.words_counted} words ({len(table)} distinct) from "
        f"{summary.files_processed} of {len(file_names)} files in {time.time() - start_time:.4f} seconds "
        f"({len(summary.skipped_files)} unopened, {len(summary.failed_files)} cut short)"
    )
    logger.info(
        f"Table: {stats.buckets} buckets, {stats.used_buckets} used, "
        f"longest chain {stats.longest_chain}, load factor {stats.load_factor:.2f}"
    )
    logger.info(f"Memory usage: {get_memory_usage():.1f} MB")

    ranking = select_top_k(table.items(), k=config.top_k, tie_break=config.tie_break)
    for line in format_ranking(ranking):
        print(line, file=out)
    return ranking


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments for the word counter.

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="topwords",
        description="Print the most frequent words across a set of text files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  topwords book1.txt book2.txt            # Top 20 words of 6-50 letters
  topwords --top 5 *.txt                  # Only the top 5
  topwords --min-word 3 --max-word 10 notes.txt
  topwords --tie-break alphabetical *.txt # Deterministic order among equal counts
  topwords --size-hint 1 small.txt        # Degenerate single-bucket table
  topwords -vv book.txt                   # Trace every word and table update
        """,
    )

    parser.add_argument(
        "files",
        nargs="*",
        help="Text files to read",
    )

    parser.add_argument(
        "--min-word",
        type=int,
        default=MIN_WORD,
        help=f"Shortest word counted (default: {MIN_WORD})",
    )

    parser.add_argument(
        "--max-word",
        type=int,
        default=MAX_WORD,
        help=f"Longest word counted (default: {MAX_WORD})",
    )

    parser.add_argument(
        "--top",
        type=int,
        default=TOP_COUNTS,
        help=f"Number of words reported (default: {TOP_COUNTS})",
    )

    parser.add_argument(
        "--size-hint",
        type=int,
        default=DEFAULT_SIZE_HINT,
        help=f"Initial number of hash buckets; performance only (default: {DEFAULT_SIZE_HINT})",
    )

    parser.add_argument(
        "--max-load-factor",
        type=float,
        default=None,
        help="Grow the table past this many entries per bucket (default: never grow)",
    )

    parser.add_argument(
        "--chunk-size-kb",
        type=int,
        default=DEFAULT_CHUNK_SIZE_KB,
        help=f"Read size in KiB (default: {DEFAULT_CHUNK_SIZE_KB})",
    )

    parser.add_argument(
        "--tie-break",
        type=str,
        choices=[t.value for t in TieBreak],
        default=TieBreak.FIRST_SEEN.value,
        help="Order of words with equal counts (default: first-seen)",
    )

    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Drop words that cannot be stored instead of aborting",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or trace every word (-vv) on stderr",
    )

    return parser.parse_args(argv)


def setup_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')
    logging.getLogger("topwords").setLevel(level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Command line entry point.

    Returns:
        0 on success, 1 on any fatal error (no files, bad options, table
        creation failure, fatal insert failure)
    """
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    try:
        if not args.files:
            raise ArgumentError("no filenames given!")
        config = WordCountConfig(
            min_word=args.min_word,
            max_word=args.max_word,
            top_k=args.top,
            size_hint=args.size_hint,
            max_load_factor=args.max_load_factor,
            chunk_size_kb=args.chunk_size_kb,
            tie_break=TieBreak(args.tie_break),
            abort_on_insert_error=not args.keep_going,
        )
        run(args.files, config)
    except TopWordsError as e:
        logger.error(FATAL_MESSAGES.get(e.kind, "{}").format(e))
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
