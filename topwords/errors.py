"""
Copyright (c) 2025. All rights reserved.
"""

"""
Error taxonomy for word frequency counting.

Every failure the counter can report is classified by an ErrorKind and
marked either fatal (the run stops with a non-zero exit status) or
recoverable (only the current file is abandoned).
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Categories of failures reported by the counter"""
    ARGUMENT = "argument"          # no input files given
    CONFIG = "config"              # invalid configuration values
    RESOURCE = "resource"          # frequency table could not be created
    FILE_OPEN = "file_open"        # input file could not be opened
    FILE_READ = "file_read"        # input file failed part way through
    TABLE_INSERT = "table_insert"  # new key could not be stored


class TopWordsError(Exception):
    """Base class for all counter failures"""

    kind: ErrorKind = ErrorKind.RESOURCE
    fatal: bool = True

    def __init__(self, message: str, kind: Optional[ErrorKind] = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class ConfigError(TopWordsError, ValueError):
    kind = ErrorKind.CONFIG


class TableCreationError(TopWordsError):
    """The frequency table could not be created (bad size hint or no memory)."""
    kind = ErrorKind.RESOURCE


class TableInsertError(TopWordsError):
    """
    A new key could not be added to the frequency table.

    The table is left exactly as it was before the failed call.
    """
    kind = ErrorKind.TABLE_INSERT

    def __init__(self, message: str, word: str):
        super().__init__(message)
        self.word = word


class FileSkippedError(TopWordsError):
    """An input file was abandoned; processing continues with the next one."""
    kind = ErrorKind.FILE_OPEN
    fatal = False

    def __init__(
        self,
        message: str,
        path: str,
        kind: ErrorKind = ErrorKind.FILE_OPEN,
        words_counted: int = 0,
    ):
        super().__init__(message, kind)
        self.path = path
        self.words_counted = words_counted


class ArgumentError(TopWordsError):
    """The command line named no input files."""
    kind = ErrorKind.ARGUMENT
