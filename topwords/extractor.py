"""
Copyright (c) 2025. All rights reserved.
"""

"""
Word extraction from byte streams.

A word is a maximal run of ASCII letters, folded to lower case, accepted
only when its length lies within [min_word, max_word]. Streams are read in
fixed-size chunks so files of any size are scanned with bounded memory;
a run of letters that straddles a chunk boundary is stitched back together
before it is measured.
"""

import logging
import re
from typing import BinaryIO, Generator

from .configs import MAX_WORD, MIN_WORD

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024

# bytes patterns and bytes.lower() only know about ASCII letters
_LETTER_RUN = re.compile(rb"[A-Za-z]+")


def _qualify(run: bytes, run_length: int, min_word: int, max_word: int):
    """Return the folded word for a letter run, or None if its length is rejected."""
    if run_length < min_word or run_length > max_word:
        return None
    word = run.lower().decode("ascii")
    logger.debug(f"found word [{word}]")
    return word


def extract_words(
    stream: BinaryIO,
    min_word: int = MIN_WORD,
    max_word: int = MAX_WORD,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Generator[str, None, None]:
    """
    Yield the qualifying words of a binary stream, in order of appearance.

    The generator is lazy and forward-only: it reads the stream as it is
    consumed and cannot be restarted. Letter runs longer than max_word are
    measured to their true end and discarded as a single token, never
    split into several shorter words. Rejected runs are skipped in a loop,
    so input made only of short words cannot exhaust the stack.

    Args:
        stream: Binary file-like object exposing read(size)
        min_word: Shortest accepted word
        max_word: Longest accepted word
        chunk_size: Number of bytes requested per read

    Yields:
        Lower-case words of min_word to max_word ASCII letters

    Raises:
        OSError: If reading the stream fails. Words yielded before the
            failure have already been delivered.

    Example:
        >>> import io
        >>> list(extract_words(io.BytesIO(b"Mangoes, PAPAYAS and figs!")))
        ['mangoes', 'papayas']
    """
    # letter run touching the end of the previous chunk; only the first
    # max_word letters are stored, pending_length keeps the true length
    pending = b""
    pending_length = 0

    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break

        if pending_length and not chunk[:1].isalpha():
            word = _qualify(pending, pending_length, min_word, max_word)
            pending, pending_length = b"", 0
            if word is not None:
                yield word

        chunk_end = len(chunk)
        for match in _LETTER_RUN.finditer(chunk):
            run = match.group()
            run_length = len(run)
            if pending_length:
                # continuation of the run carried over; always starts at offset 0
                run = (pending + run)[:max_word]
                run_length += pending_length
                pending, pending_length = b"", 0

            if match.end() == chunk_end:
                pending, pending_length = run[:max_word], run_length
                continue

            word = _qualify(run, run_length, min_word, max_word)
            if word is not None:
                yield word

    if pending_length:
        word = _qualify(pending, pending_length, min_word, max_word)
        if word is not None:
            yield word
