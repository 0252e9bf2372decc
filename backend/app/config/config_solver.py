# File: backend/app/config/config_solver.py
# Version: v0.2.0

"""
Solver configuration loader (attribute-access "view" object).

JSON example:

{
  "overlap_size": 2,
  "border_size": 40,
  "time_limit_s": null
}

Missing keys fall back to the environment-backed defaults in
backend.app.core.config.settings.

v0.2.0
- Optional `time_limit_s` (positive float or null).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from backend.app.core.config import settings


@dataclass(frozen=True)
class SolverConfig:
    overlap_size: int
    border_size: int
    time_limit_s: Optional[float] = None

    def __post_init__(self) -> None:
        if self.overlap_size < 1:
            raise ValueError(f"overlap_size must be >= 1 (got {self.overlap_size})")
        if self.border_size < 1:
            raise ValueError(f"border_size must be >= 1 (got {self.border_size})")
        if self.time_limit_s is not None and self.time_limit_s <= 0:
            raise ValueError(f"time_limit_s must be > 0 when set (got {self.time_limit_s})")

    @classmethod
    def defaults(cls) -> "SolverConfig":
        return cls(
            overlap_size=settings.OVERLAP_SIZE,
            border_size=settings.BORDER_SIZE,
            time_limit_s=settings.TIME_LIMIT_S,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolverConfig":
        if not isinstance(data, dict):
            raise ValueError("solver config must be a JSON object")
        base = cls.defaults()
        limit = data.get("time_limit_s", base.time_limit_s)
        return cls(
            overlap_size=int(data.get("overlap_size", base.overlap_size)),
            border_size=int(data.get("border_size", base.border_size)),
            time_limit_s=None if limit is None else float(limit),
        )

    @classmethod
    def from_json_file(cls, path: Path | str) -> "SolverConfig":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))


def load_solver_config(path: Optional[Path | str]) -> SolverConfig:
    """
    Load a SolverConfig from JSON, or return defaults when `path` is None.
    """
    if path is None:
        return SolverConfig.defaults()
    return SolverConfig.from_json_file(path)


__all__ = [
    "SolverConfig",
    "load_solver_config",
]
