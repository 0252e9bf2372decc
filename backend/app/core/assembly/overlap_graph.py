# File: backend/app/core/assembly/overlap_graph.py
# Version: v0.3.0
"""
Overlap graph over numeric fragments.

Nodes are fragment indices. An edge i -> j exists when the last `k` digits of
fragment i equal the first `k` digits of fragment j (i != j).

v0.3.0
- Validate all fragment lengths against `k` before slicing; undersized
  fragments now raise FragmentTooShortError instead of producing short keys.

v0.2.0
- Successor lists are kept in ascending index order; the search relies on it
  for its first-found tie-break.
"""

from __future__ import annotations

__all__ = [
    "SolverError",
    "FragmentTooShortError",
    "suffix_of",
    "prefix_of",
    "ensure_overlap_size",
    "build_overlap_graph",
    "edge_count",
]

import logging
from typing import List, Sequence

logger = logging.getLogger(__name__)


class SolverError(RuntimeError):
    pass


class FragmentTooShortError(SolverError):
    """Raised when a fragment cannot supply a k-length prefix/suffix."""
    def __init__(self, index: int, fragment: str, overlap: int):
        self.index = index
        self.fragment = fragment
        self.overlap = overlap
        super().__init__(
            f"Fragment #{index} ({fragment!r}, {len(fragment)} digits) is shorter "
            f"than the overlap size {overlap}"
        )


def suffix_of(fragment: str, k: int) -> str:
    return fragment[len(fragment) - k:]


def prefix_of(fragment: str, k: int) -> str:
    return fragment[:k]


def ensure_overlap_size(fragments: Sequence[str], k: int) -> None:
    """
    Check the overlap precondition for every fragment.

    Raises:
        ValueError: k is not a positive integer.
        FragmentTooShortError: first fragment (by index) with len < k.
    """
    if k <= 0:
        raise ValueError(f"overlap size must be >= 1 (got {k})")
    for idx, frag in enumerate(fragments):
        if len(frag) < k:
            raise FragmentTooShortError(idx, frag, k)


def build_overlap_graph(fragments: Sequence[str], k: int) -> List[List[int]]:
    """
    Build adjacency lists for the overlap graph.

    adjacency[i] lists every j != i whose k-prefix equals the k-suffix of i,
    in ascending j. Cost is O(n^2 * k).
    """
    ensure_overlap_size(fragments, k)

    prefixes = [prefix_of(f, k) for f in fragments]
    adjacency: List[List[int]] = []
    for i, frag in enumerate(fragments):
        suffix = suffix_of(frag, k)
        adjacency.append([j for j, pre in enumerate(prefixes) if j != i and pre == suffix])

    logger.debug("Overlap graph: %d node(s), %d edge(s), k=%d",
                 len(adjacency), edge_count(adjacency), k)
    return adjacency


def edge_count(adjacency: Sequence[Sequence[int]]) -> int:
    return sum(len(succ) for succ in adjacency)
