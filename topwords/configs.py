"""
Copyright (c) 2025. All rights reserved.
"""

"""
Configuration dataclasses for word frequency counting.

Groups the tunable parameters of a counting run: the word length filter,
the size of the final ranking, the sizing of the frequency table and the
policies applied when ranking ties or table failures occur. Defaults
match the classic behaviour of the command line tool: words of 6 to 50
letters, top 20 words, a table hinted at 10000 buckets.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import ConfigError

MIN_WORD = 6
MAX_WORD = 50
TOP_COUNTS = 20
DEFAULT_SIZE_HINT = 10000
DEFAULT_CHUNK_SIZE_KB = 64


class TieBreak(Enum):
    """Ordering applied between ranking entries with equal counts"""
    FIRST_SEEN = "first-seen"      # earlier enumerated entry ranks higher
    LAST_SEEN = "last-seen"        # later enumerated entry ranks higher
    ALPHABETICAL = "alphabetical"  # smaller word ranks higher


@dataclass
class WordCountConfig:
    """
    Configuration for a word counting run.

    Attributes:
        min_word (int): Shortest accepted word, in letters
        max_word (int): Longest accepted word, in letters
        top_k (int): Number of entries kept in the final ranking
        size_hint (int): Initial bucket count of the frequency table. Only
            affects performance; the table rejects values below 1.
        max_load_factor (float, optional): Grow the table once
            entries / buckets exceeds this value. None keeps the table at
            its hinted size.
        chunk_size_kb (int): Read size used when scanning files
        tie_break (TieBreak): Ordering of equal counts in the ranking
        abort_on_insert_error (bool): Treat a failed table insert as fatal

    Example:
        config = WordCountConfig(
            min_word=4,
            top_k=10,
            tie_break=TieBreak.ALPHABETICAL,
        )
    """
    min_word: int = MIN_WORD
    max_word: int = MAX_WORD
    top_k: int = TOP_COUNTS
    size_hint: int = DEFAULT_SIZE_HINT
    max_load_factor: Optional[float] = None
    chunk_size_kb: int = DEFAULT_CHUNK_SIZE_KB
    tie_break: TieBreak = TieBreak.FIRST_SEEN
    abort_on_insert_error: bool = True

    def __post_init__(self):
        if self.min_word < 1:
            raise ConfigError(f"min_word must be at least 1, got {self.min_word}")
        if self.max_word < self.min_word:
            raise ConfigError(
                f"max_word ({self.max_word}) must not be below min_word ({self.min_word})"
            )
        if self.top_k < 1:
            raise ConfigError(f"top_k must be at least 1, got {self.top_k}")
        if self.chunk_size_kb < 1:
            raise ConfigError(f"chunk_size_kb must be at least 1, got {self.chunk_size_kb}")
        if self.max_load_factor is not None and self.max_load_factor <= 0:
            raise ConfigError(
                f"max_load_factor must be positive, got {self.max_load_factor}"
            )
        if isinstance(self.tie_break, str):
            self.tie_break = TieBreak(self.tie_break)

    @property
    def chunk_size(self) -> int:
        """Read size in bytes"""
        return self.chunk_size_kb * 1024
