# File: backend/app/core/models/solve_result.py
# Version: v0.2.0

"""
Shared dataclass describing the outcome of one solve() call.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class SolveResult:
    """
    Merged digit sequence plus the path that produced it.
    """
    sequence:       str                # merged digits ("" when there are no fragments)
    path:           List[int]          = field(default_factory=list)  # fragment indices in chain order
    fragments:      int                = 0      # number of fragments the graph was built from
    overlap:        int                = 0      # overlap size k
    edge_count:     int                = 0
    elapsed_ms:     float              = 0.0    # wall-clock time of the solve call
    interrupted:    bool               = False  # True if the time limit cut the search short
    nodes_expanded: int                = 0

    @property
    def length(self) -> int:
        return len(self.sequence)

    @property
    def is_empty(self) -> bool:
        return not self.sequence
