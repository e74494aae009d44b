"""
Copyright (c) 2025. All rights reserved.
"""

"""
Top-K selection over a frequency table enumeration.

The ranking is a single fold over the (word, count) pairs: the K best
entries seen so far are kept sorted by count, and each new pair is placed
by scanning upward from the lowest rank. This costs O(N * K) time for N
distinct words and O(K) extra space, which beats sorting the whole table
when K is small.

Tie handling is selected with TieBreak:
    FIRST_SEEN:   a new entry stops below the first slot whose count is
                  >= its own, so among equal counts the earlier enumerated
                  word keeps the higher rank and, at the cut-off, the first
                  K tied words survive.
    LAST_SEEN:    a new entry stops only below a strictly greater count,
                  so the later enumerated word ranks higher.
    ALPHABETICAL: equal counts are ordered by word, giving the same ranking
                  whatever order the table enumerates in.

With FIRST_SEEN and LAST_SEEN, which tied words make the cut depends on the
table's enumeration order, not on the words themselves.
"""

import logging
from typing import Iterable, List, Tuple

from .configs import TOP_COUNTS, TieBreak

logger = logging.getLogger(__name__)


class TopKSelector:
    """
    Incremental top-K ranking of (word, count) pairs.

    Example:
        >>> selector = TopKSelector(k=2)
        >>> for word, count in [("papayas", 1), ("mangoes", 3), ("bananas", 1)]:
        ...     selector.offer(word, count)
        >>> selector.ranking
        [('mangoes', 3), ('papayas', 1)]
    """

    def __init__(self, k: int = TOP_COUNTS, tie_break: TieBreak = TieBreak.FIRST_SEEN):
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        self.k = k
        self.tie_break = tie_break
        self._ranking: List[Tuple[str, int]] = []

    def _outranks(self, word: str, count: int, slot: Tuple[str, int]) -> bool:
        """True if the new entry belongs above the entry held in slot."""
        slot_word, slot_count = slot
        if self.tie_break is TieBreak.FIRST_SEEN:
            return count > slot_count
        if self.tie_break is TieBreak.LAST_SEEN:
            return count >= slot_count
        return count > slot_count or (count == slot_count and word < slot_word)

    def offer(self, word: str, count: int) -> None:
        """Consider one pair for the ranking."""
        position = len(self._ranking)
        while position > 0 and self._outranks(word, count, self._ranking[position - 1]):
            position -= 1
        logger.debug(f"iterating: [{word}] {count}, put it in slot {position}")

        if position >= self.k:
            return
        self._ranking.insert(position, (word, count))
        if len(self._ranking) > self.k:
            self._ranking.pop()

    @property
    def ranking(self) -> List[Tuple[str, int]]:
        """Current ranking, highest count first."""
        return list(self._ranking)


def select_top_k(
    entries: Iterable[Tuple[str, int]],
    k: int = TOP_COUNTS,
    tie_break: TieBreak = TieBreak.FIRST_SEEN,
) -> List[Tuple[str, int]]:
    """
    Return the k highest-count pairs of entries, highest first.

    Args:
        entries: (word, count) pairs, typically FrequencyTable.items()
        k: Maximum ranking length
        tie_break: Ordering among equal counts

    Returns:
        At most k pairs with non-increasing counts

    Example:
        >>> select_top_k([("mangoes", 3), ("papayas", 1)], k=20)
        [('mangoes', 3), ('papayas', 1)]
    """
    selector = TopKSelector(k, tie_break)
    for word, count in entries:
        selector.offer(word, count)
    return selector.ranking
