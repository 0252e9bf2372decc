# File: backend/tests/test_overlap_graph.py
# Version: v0.1.0

"""
Unit tests for overlap graph construction.
"""

import pytest

from backend.app.core.assembly.overlap_graph import (
    FragmentTooShortError,
    build_overlap_graph,
    edge_count,
    ensure_overlap_size,
    prefix_of,
    suffix_of,
)


def test_prefix_and_suffix():
    assert prefix_of("12345", 2) == "12"
    assert suffix_of("12345", 2) == "45"
    assert suffix_of("12", 2) == "12"


def test_simple_chain_edges():
    adj = build_overlap_graph(["123", "234", "345"], 2)
    assert adj == [[1], [2], []]
    assert edge_count(adj) == 2


def test_no_self_loops():
    assert build_overlap_graph(["11"], 1) == [[]]


def test_identical_fragments_are_distinct_nodes():
    assert build_overlap_graph(["121", "121"], 1) == [[1], [0]]


def test_successors_in_ascending_index_order():
    adj = build_overlap_graph(["10", "03", "02", "01"], 1)
    assert adj[0] == [1, 2, 3]


def test_empty_input():
    assert build_overlap_graph([], 2) == []
    assert edge_count([]) == 0


def test_fragment_shorter_than_overlap_is_rejected():
    with pytest.raises(FragmentTooShortError) as exc_info:
        build_overlap_graph(["123", "4", "56"], 2)
    err = exc_info.value
    assert err.index == 1
    assert err.fragment == "4"
    assert err.overlap == 2


@pytest.mark.parametrize("k", [0, -1])
def test_non_positive_overlap_is_rejected(k):
    with pytest.raises(ValueError):
        ensure_overlap_size(["123"], k)
