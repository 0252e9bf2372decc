# File: backend/app/api/v1/solve.py
# Version: v0.2.0
"""
API router for the overlap chain solver.

POST /api/solve
  - Body: SolveRequest
  - Returns: SolveResponse (merged sequence + chain)

The handler is a plain `def`: FastAPI runs it in its threadpool, so a long
exhaustive search does not block the event loop.
"""

from fastapi import APIRouter, HTTPException

from ...core.assembly.overlap_graph import SolverError
from ...schemas.solve import PathStep, SolveRequest, SolveResponse
from ...services.solve_service import TooManyFragmentsError, run_solve

router = APIRouter(tags=["solve"])


@router.post("/solve", response_model=SolveResponse)
def solve_endpoint(payload: SolveRequest) -> SolveResponse:
    """Find the longest overlap chain of the given fragments."""
    try:
        result = run_solve(
            payload.fragments,
            overlap=payload.overlap,
            time_limit_s=payload.time_limit_s,
        )
    except TooManyFragmentsError as exc:
        raise HTTPException(status_code=413, detail=str(exc)) from exc
    except SolverError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return SolveResponse(
        sequence=result.sequence,
        length=result.length,
        overlap=result.overlap,
        fragments=result.fragments,
        edge_count=result.edge_count,
        elapsed_ms=result.elapsed_ms,
        interrupted=result.interrupted,
        path=[PathStep(index=i, fragment=payload.fragments[i]) for i in result.path],
    )
