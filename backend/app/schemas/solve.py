# File: backend/app/schemas/solve.py
# Version: v0.2.0
"""
Pydantic schemas for the overlap chain solver endpoint.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, confloat, conint, constr


class SolveRequest(BaseModel):
    """Request payload: numeric fragments in input order."""
    fragments: List[constr(pattern=r"^[0-9]+$")] = Field(
        ...,
        description="Numeric fragments; each one or more ASCII digits. Order sets the tie-break.",
        examples=[["123", "234", "345"]],
    )
    overlap: Optional[conint(ge=1)] = Field(
        None,
        description="Digits that must match between neighbours (server default if omitted).",
    )
    time_limit_s: Optional[confloat(gt=0)] = Field(
        None,
        description="Stop the search after this many seconds (capped by the server limit) and return the best chain so far.",
    )


class PathStep(BaseModel):
    index: int = Field(..., ge=0, description="Fragment index in the request.")
    fragment: str


class SolveResponse(BaseModel):
    """Merged sequence plus the chain that produced it."""
    sequence: str = Field(..., description="Merged digits; empty when no fragments were given.")
    length: int = Field(..., ge=0)
    overlap: int = Field(..., ge=1)
    fragments: int = Field(..., ge=0, description="Number of fragments in the request.")
    edge_count: int = Field(..., ge=0)
    elapsed_ms: float = Field(..., ge=0)
    interrupted: bool = False
    path: List[PathStep] = Field(default_factory=list)
