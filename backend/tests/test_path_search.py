# File: backend/tests/test_path_search.py
# Version: v0.1.0

"""
Unit tests for the backtracking longest-path search.
"""

import time
from itertools import combinations

import pytest

from backend.app.core.assembly.path_search import (
    SearchContext,
    SearchInterrupted,
    find_longest_path,
)


def test_empty_graph():
    assert find_longest_path([]) == []


def test_single_node():
    assert find_longest_path([[]]) == [0]


def test_chain():
    assert find_longest_path([[1], [2], []]) == [0, 1, 2]


def test_first_successor_wins_tie():
    assert find_longest_path([[1, 2], [], []]) == [0, 1]
    assert find_longest_path([[2, 1], [], []]) == [0, 2]


def test_equal_length_path_from_later_start_does_not_replace():
    # [0, 1] and [2, 3] have the same length
    assert find_longest_path([[1], [], [3], []]) == [0, 1]


def test_longer_path_from_later_start_replaces():
    assert find_longest_path([[1], [], [3], [4], []]) == [2, 3, 4]


def test_cycle_is_bounded_by_visited_set():
    assert find_longest_path([[1], [0]]) == [0, 1]
    assert find_longest_path([[1], [2], [0]]) == [0, 1, 2]


def test_backtracking_finds_longest_branch():
    # 0 -> 1 is a dead end; 0 -> 2 -> 3 -> 1 is longer
    adj = [[1, 2], [], [3], [1]]
    assert find_longest_path(adj) == [0, 2, 3, 1]


def test_context_is_clean_after_search():
    ctx = SearchContext()
    path = find_longest_path([[1], [2], []], ctx)
    assert path == ctx.best_path
    assert ctx.path == []
    assert ctx.visited == [False, False, False]
    # roots 0, 1, 2 expand 3 + 2 + 1 nodes
    assert ctx.nodes_expanded == 6
    assert ctx.improvements == 3


def test_subset_of_start_nodes_never_beats_all_starts():
    adj = [[1, 3], [2], [], [4], [1], [0]]
    full = find_longest_path(adj)
    for r in range(1, len(adj)):
        for subset in combinations(range(len(adj)), r):
            assert len(find_longest_path(adj, start_nodes=subset)) <= len(full)


def test_start_nodes_are_tried_in_ascending_order():
    adj = [[1], [], [3], []]
    assert find_longest_path(adj, start_nodes=[2, 0]) == [0, 1]


def test_expired_deadline_interrupts_and_keeps_best():
    ctx = SearchContext(deadline=time.monotonic() - 1.0)
    with pytest.raises(SearchInterrupted):
        find_longest_path([[1], []], ctx)
    assert ctx.best_path == []


def test_with_time_limit_sets_deadline():
    assert SearchContext.with_time_limit(None).deadline is None
    ctx = SearchContext.with_time_limit(60.0)
    assert ctx.deadline is not None
    assert not ctx.expired()


@pytest.mark.parametrize("roots", [[-1], [0, 3], [5]])
def test_start_nodes_out_of_range_are_rejected(roots):
    ctx = SearchContext()
    with pytest.raises(ValueError):
        find_longest_path([[1], [2], []], ctx, start_nodes=roots)
    assert ctx.best_path == []
