# File: backend/app/core/assembly/path_search.py
# Version: v0.4.1
"""
Exhaustive longest-simple-path search over an overlap graph.

Backtracking DFS from every start node, ascending. A candidate replaces the
incumbent best path only when it is strictly longer, so among equal-length
paths the first one found wins (earliest start node, then earliest successor
in adjacency order).

All mutable state lives on an explicit SearchContext that the caller owns:
the best path is readable at any time, including from another thread while
a search is running, and survives an interrupted search.

v0.4.1
- `start_nodes` outside range(n) raise ValueError (negative indices used to
  wrap around).

v0.4.0
- Optional wall-clock deadline on SearchContext. When it passes, the search
  unwinds with SearchInterrupted and the context keeps the best-so-far path.

v0.3.0
- `start_nodes` restricts the candidate roots (used by tests and benchmarks).

v0.2.0
- Moved visited markers and the working path onto SearchContext.
"""

from __future__ import annotations

__all__ = ["SearchContext", "SearchInterrupted", "find_longest_path"]

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

logger = logging.getLogger(__name__)


class SearchInterrupted(RuntimeError):
    """Raised inside the search when the context deadline has passed."""


@dataclass
class SearchContext:
    """
    Accumulator threaded through one search.

    best_path:      longest path found so far (replaced, never mutated in place)
    visited:        per-node marker, True iff the node is on the working path
    path:           working path buffer (append on descent, pop on unwind)
    deadline:       time.monotonic() value after which the search stops
    """
    best_path: List[int] = field(default_factory=list)
    visited: List[bool] = field(default_factory=list)
    path: List[int] = field(default_factory=list)
    deadline: Optional[float] = None
    nodes_expanded: int = 0
    improvements: int = 0

    @classmethod
    def with_time_limit(cls, time_limit_s: Optional[float]) -> "SearchContext":
        if time_limit_s is None:
            return cls()
        return cls(deadline=time.monotonic() + float(time_limit_s))

    def reset(self, n_nodes: int) -> None:
        self.visited = [False] * n_nodes
        self.path = []

    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline


def find_longest_path(
    adjacency: Sequence[Sequence[int]],
    context: Optional[SearchContext] = None,
    start_nodes: Optional[Iterable[int]] = None,
) -> List[int]:
    """
    Return the longest simple path (by node count) in `adjacency`.

    Args:
        adjacency:   successor lists, as built by build_overlap_graph
        context:     accumulator to use; a fresh one is created if omitted.
                     Pass your own to read `best_path` mid-search or to set a
                     deadline.
        start_nodes: candidate roots; defaults to every node. Always tried
                     in ascending order.

    Returns:
        A copy of the best path. Empty when the graph has no nodes.

    Raises:
        SearchInterrupted: the context deadline passed. `context.best_path`
        still holds the best path recorded so far.
        ValueError: a start node is outside range(len(adjacency)).
    """
    ctx = context if context is not None else SearchContext()
    n = len(adjacency)
    ctx.reset(n)

    if start_nodes is None:
        roots: Sequence[int] = range(n)
    else:
        roots = sorted(set(start_nodes))
        bad = [s for s in roots if not 0 <= s < n]
        if bad:
            raise ValueError(f"start node(s) {bad} outside 0..{n - 1}")
    for s in roots:
        ctx.visited[s] = True
        ctx.path.append(s)
        try:
            _extend(adjacency, s, ctx)
        finally:
            ctx.path.pop()
            ctx.visited[s] = False

    return list(ctx.best_path)


def _extend(adjacency: Sequence[Sequence[int]], u: int, ctx: SearchContext) -> None:
    if ctx.expired():
        raise SearchInterrupted(
            f"time limit reached after {ctx.nodes_expanded} expansion(s); "
            f"best path has {len(ctx.best_path)} node(s)"
        )
    ctx.nodes_expanded += 1

    if len(ctx.path) > len(ctx.best_path):
        ctx.best_path = list(ctx.path)
        ctx.improvements += 1
        logger.debug("New best path: %d node(s) (start=%d)", len(ctx.best_path), ctx.path[0])

    visited = ctx.visited
    path = ctx.path
    for v in adjacency[u]:
        if not visited[v]:
            visited[v] = True
            path.append(v)
            try:
                _extend(adjacency, v, ctx)
            finally:
                path.pop()  # backtrack
                visited[v] = False
