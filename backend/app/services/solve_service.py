# File: backend/app/services/solve_service.py
# Version: v0.2.0
"""
Service layer for running the overlap path solver on request data.

v0.2.0
- Every solve is time-boxed by settings.API_TIME_LIMIT_S. A request (or
  TIME_LIMIT_S) can shorten the limit but not extend it; a search that hits
  it returns the best chain so far with `interrupted=True`.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from backend.app.core.assembly.overlap_path_solver import OverlapPathSolver
from backend.app.core.config import settings
from backend.app.core.models.solve_result import SolveResult

logger = logging.getLogger(__name__)


class TooManyFragmentsError(ValueError):
    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"{count} fragments exceeds the limit of {limit} per request")


def resolve_time_limit(requested: Optional[float]) -> float:
    """Smallest of the request limit, TIME_LIMIT_S and API_TIME_LIMIT_S (ignoring None)."""
    limits = [settings.API_TIME_LIMIT_S]
    if settings.TIME_LIMIT_S is not None:
        limits.append(settings.TIME_LIMIT_S)
    if requested is not None:
        limits.append(requested)
    return min(limits)


def run_solve(
    fragments: Sequence[str],
    overlap: Optional[int] = None,
    time_limit_s: Optional[float] = None,
) -> SolveResult:
    """
    Solve with server defaults for any parameter left as None.

    Raises:
        TooManyFragmentsError: more fragments than settings.MAX_API_FRAGMENTS.
        SolverError: see OverlapPathSolver.
    """
    if len(fragments) > settings.MAX_API_FRAGMENTS:
        raise TooManyFragmentsError(len(fragments), settings.MAX_API_FRAGMENTS)

    k = overlap if overlap is not None else settings.OVERLAP_SIZE
    solver = OverlapPathSolver(
        fragments, k, time_limit_s=resolve_time_limit(time_limit_s), logger=logger
    )
    return solver.solve_detailed()
