# File: backend/app/core/assembly/overlap_path_solver.py
# Version: v0.5.0
"""
Overlap path solver: chain numeric fragments into the longest digit sequence.

Pipeline:
  1) build the overlap graph (suffix(k) of i == prefix(k) of j)
  2) exhaustive backtracking search for the longest simple path
  3) merge the fragments along that path, eliding each k-digit overlap

The search is exact and exponential in the worst case. An optional time
limit stops it early; the result then carries the best path found so far and
`interrupted=True`.

v0.5.0
- Optional `time_limit_s`; best path exposed through `best_path` while a
  search is running.

v0.4.0
- Undersized fragments are rejected up front (FragmentTooShortError) instead
  of failing somewhere inside graph construction.

v0.3.0
- solve_detailed() returns a SolveResult with path, counters and timing.
"""

from __future__ import annotations

import logging
import sys
import time
from typing import List, Optional, Sequence

from backend.app.core.assembly.overlap_graph import (
    build_overlap_graph,
    edge_count,
)
from backend.app.core.assembly.path_search import (
    SearchContext,
    SearchInterrupted,
    find_longest_path,
)
from backend.app.core.models.solve_result import SolveResult

# Headroom above the deepest possible recursion (one frame per path node)
RECURSION_HEADROOM = 200


class OverlapPathSolver:
    def __init__(
        self,
        fragments: Sequence[str],
        overlap: int,
        *,
        time_limit_s: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.fragments = tuple(fragments)
        self.overlap = int(overlap)
        self.time_limit_s = time_limit_s
        self.log = logger or logging.getLogger(__name__)
        self.adjacency: List[List[int]] = []
        self._context: Optional[SearchContext] = None

    # --------------------- Public API ---------------------

    @property
    def best_path(self) -> List[int]:
        """Best path recorded so far (empty before the first search)."""
        if self._context is None:
            return []
        return list(self._context.best_path)

    def solve(self) -> str:
        """Return the longest merged digit sequence ("" if there are no fragments)."""
        return self.solve_detailed().sequence

    def solve_detailed(self) -> SolveResult:
        t0 = time.perf_counter()

        self.adjacency = build_overlap_graph(self.fragments, self.overlap)
        n_edges = edge_count(self.adjacency)
        self.log.info("Overlap graph: %d fragment(s), %d edge(s), overlap=%d",
                      len(self.fragments), n_edges, self.overlap)

        self._ensure_recursion_depth(len(self.fragments))

        ctx = SearchContext.with_time_limit(self.time_limit_s)
        self._context = ctx
        interrupted = False
        try:
            path = find_longest_path(self.adjacency, ctx)
        except SearchInterrupted as err:
            interrupted = True
            path = list(ctx.best_path)
            self.log.warning("Search stopped early: %s", err)

        sequence = self.reconstruct(path)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        self.log.info("Longest chain: %d fragment(s), %d digit(s) in %.1f ms",
                      len(path), len(sequence), elapsed_ms)

        return SolveResult(
            sequence=sequence,
            path=path,
            fragments=len(self.fragments),
            overlap=self.overlap,
            edge_count=n_edges,
            elapsed_ms=elapsed_ms,
            interrupted=interrupted,
            nodes_expanded=ctx.nodes_expanded,
        )

    def reconstruct(self, path: Sequence[int]) -> str:
        """
        Merge fragments along `path`: the first one in full, then each
        following fragment without its first `overlap` digits.
        """
        if not path:
            return ""
        parts = [self.fragments[path[0]]]
        parts.extend(self.fragments[idx][self.overlap:] for idx in path[1:])
        return "".join(parts)

    # --------------------- Helpers ---------------------

    @staticmethod
    def _ensure_recursion_depth(n_nodes: int) -> None:
        needed = n_nodes + RECURSION_HEADROOM
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)
