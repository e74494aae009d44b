"""
Copyright (c) 2025. All rights reserved.
"""

"""
Word frequency counting across text files.

Modules:
    extractor: Lazy extraction of length-filtered, lower-cased ASCII words
    symtab: Chained hash table mapping words to counts
    topk: Single-pass top-K ranking over the table's entries
    word_count: File processing, reporting and the command line interface
"""

from .configs import TieBreak, WordCountConfig
from .errors import (
    ArgumentError,
    ConfigError,
    ErrorKind,
    FileSkippedError,
    TableCreationError,
    TableInsertError,
    TopWordsError,
)
from .extractor import extract_words
from .symtab import FrequencyTable, TableStats
from .topk import TopKSelector, select_top_k
from .word_count import count_words, format_ranking, main, process_file

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "WordCountConfig",
    "TieBreak",
    # Errors
    "ErrorKind",
    "TopWordsError",
    "ArgumentError",
    "ConfigError",
    "TableCreationError",
    "TableInsertError",
    "FileSkippedError",
    # Core
    "extract_words",
    "FrequencyTable",
    "TableStats",
    "TopKSelector",
    "select_top_k",
    # Driver
    "process_file",
    "count_words",
    "format_ranking",
    "main",
]
