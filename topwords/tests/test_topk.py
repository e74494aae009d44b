"""
Copyright (c) 2025. All rights reserved.
"""

"""
Unit tests for top-K selection.
"""

import os
import random
import sys

sys.path.append(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)

import pytest

from topwords.configs import TieBreak
from topwords.symtab import FrequencyTable
from topwords.topk import TopKSelector, select_top_k


def random_entries(count, seed, max_count=10):
    rng = random.Random(seed)
    return [(f"word{index:04d}", rng.randint(1, max_count)) for index in range(count)]


class TestSelectTopK:
    """Test suite for select_top_k."""

    def test_fruit_scenario(self):
        ranking = select_top_k([("papayas", 1), ("mangoes", 3), ("bananas", 1)])
        assert ranking[0] == ("mangoes", 3)
        assert sorted(ranking[1:]) == [("bananas", 1), ("papayas", 1)]

    def test_empty(self):
        assert select_top_k([]) == []

    def test_fewer_entries_than_k(self):
        entries = [("alpha", 2), ("beta", 5)]
        assert select_top_k(entries, k=20) == [("beta", 5), ("alpha", 2)]

    def test_truncates_to_k(self):
        entries = [(f"word{count:02d}", count) for count in range(1, 31)]
        ranking = select_top_k(entries, k=20)
        assert len(ranking) == 20
        assert ranking[0] == ("word30", 30)
        assert ranking[-1] == ("word11", 11)

    @pytest.mark.parametrize("tie_break", list(TieBreak))
    @pytest.mark.parametrize("seed", range(5))
    def test_bounded_and_non_increasing(self, tie_break, seed):
        entries = random_entries(200, seed)
        ranking = select_top_k(entries, k=20, tie_break=tie_break)
        assert len(ranking) <= 20
        assert len(ranking) <= len(entries)
        counts = [count for _, count in ranking]
        assert counts == sorted(counts, reverse=True)
        assert counts == sorted((count for _, count in entries), reverse=True)[:20]

    def test_rejects_bad_k(self):
        with pytest.raises(ValueError):
            select_top_k([("alpha", 1)], k=0)


class TestTieBreak:
    """Test suite for the tie-break rules."""

    def test_first_seen_keeps_earlier_entries(self):
        entries = [("aaa", 2), ("bbb", 2), ("ccc", 2)]
        assert select_top_k(entries, k=2, tie_break=TieBreak.FIRST_SEEN) == [
            ("aaa", 2),
            ("bbb", 2),
        ]

    def test_last_seen_promotes_later_entries(self):
        entries = [("aaa", 2), ("bbb", 2), ("ccc", 2)]
        assert select_top_k(entries, k=2, tie_break=TieBreak.LAST_SEEN) == [
            ("ccc", 2),
            ("bbb", 2),
        ]

    def test_alphabetical_ignores_enumeration_order(self):
        entries = [("ccc", 2), ("aaa", 2), ("ddd", 5), ("bbb", 2)]
        expected = [("ddd", 5), ("aaa", 2), ("bbb", 2)]
        assert select_top_k(entries, k=3, tie_break=TieBreak.ALPHABETICAL) == expected
        assert select_top_k(reversed(entries), k=3, tie_break=TieBreak.ALPHABETICAL) == expected

    @pytest.mark.parametrize("seed", range(10))
    def test_first_seen_matches_stable_sort(self, seed):
        entries = random_entries(300, seed, max_count=5)
        expected = sorted(entries, key=lambda entry: -entry[1])[:20]
        assert select_top_k(entries, k=20, tie_break=TieBreak.FIRST_SEEN) == expected

    @pytest.mark.parametrize("seed", range(10))
    def test_last_seen_matches_reversed_stable_sort(self, seed):
        entries = random_entries(300, seed, max_count=5)
        expected = sorted(reversed(entries), key=lambda entry: -entry[1])[:20]
        assert select_top_k(entries, k=20, tie_break=TieBreak.LAST_SEEN) == expected

    @pytest.mark.parametrize("seed", range(10))
    def test_alphabetical_matches_full_sort(self, seed):
        entries = random_entries(300, seed, max_count=5)
        random.Random(seed).shuffle(entries)
        expected = sorted(entries, key=lambda entry: (-entry[1], entry[0]))[:20]
        assert select_top_k(entries, k=20, tie_break=TieBreak.ALPHABETICAL) == expected


class TestTopKSelector:
    """Test suite for the incremental selector."""

    def test_offer_builds_ranking(self):
        selector = TopKSelector(k=2)
        for word, count in [("papayas", 1), ("mangoes", 3), ("bananas", 1), ("cherries", 2)]:
            selector.offer(word, count)
        assert selector.ranking == [("mangoes", 3), ("cherries", 2)]

    def test_ranking_is_a_copy(self):
        selector = TopKSelector(k=3)
        selector.offer("mangoes", 1)
        selector.ranking.append(("bogus", 99))
        assert selector.ranking == [("mangoes", 1)]

    def test_idempotent_over_static_table(self):
        """Ranking the same table twice gives the same answer."""
        table = FrequencyTable(1)
        for word, count in random_entries(150, seed=7, max_count=4):
            table.insert_or_update(word, count)
        first = select_top_k(table.items())
        second = select_top_k(table.items())
        assert first == second
        assert len(first) == 20
