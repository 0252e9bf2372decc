# File: backend/app/core/export/csv_exporter.py
# Version: v0.1.0
"""
CSV export of the chain: one row per fragment on the best path.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List, Sequence

from backend.app.core.models.solve_result import SolveResult

HEADERS = ["position", "fragment_index", "fragment", "offset", "emitted"]


def path_rows(result: SolveResult, fragments: Sequence[str]) -> List[Dict[str, str]]:
    """
    `offset` is where the fragment starts inside the merged sequence;
    `emitted` is the part of it that was appended (the overlap is elided).
    """
    rows: List[Dict[str, str]] = []
    k = result.overlap
    offset = 0
    for pos, idx in enumerate(result.path):
        frag = fragments[idx]
        emitted = frag if pos == 0 else frag[k:]
        if pos > 0:
            offset += len(fragments[result.path[pos - 1]]) - k
        rows.append({
            "position": str(pos + 1),
            "fragment_index": str(idx),
            "fragment": frag,
            "offset": str(offset),
            "emitted": emitted,
        })
    return rows


def export_path_to_csv(result: SolveResult, fragments: Sequence[str], csv_path: Path) -> Path:
    """Write the path rows (header only when the path is empty)."""
    with csv_path.open("w", newline="", encoding="utf-8") as fh:
        w = csv.DictWriter(fh, fieldnames=HEADERS)
        w.writeheader()
        w.writerows(path_rows(result, fragments))
    return csv_path
