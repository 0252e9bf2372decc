# File: backend/app/core/export/json_exporter.py
# Version: v0.2.0

"""
Export a SolveResult to a clean JSON file.
"""

import json
from pathlib import Path
from typing import Any, Dict, Sequence

from backend.app.core.models.solve_result import SolveResult


def result_to_dict(result: SolveResult, fragments: Sequence[str]) -> Dict[str, Any]:
    return {
        "sequence":       result.sequence,
        "length":         result.length,
        "overlap":        result.overlap,
        "fragments":      result.fragments,
        "edge_count":     result.edge_count,
        "elapsed_ms":     round(result.elapsed_ms, 3),
        "interrupted":    result.interrupted,
        "nodes_expanded": result.nodes_expanded,
        "path": [
            {"index": idx, "fragment": fragments[idx]} for idx in result.path
        ],
    }


def export_result_to_json(result: SolveResult,
                          fragments: Sequence[str],
                          json_path: Path,
                          run_id: str) -> Dict[str, Any]:
    """
    Write the result (and the fragments along its path) to `json_path`.
    Returns the payload that was written.
    """
    payload = {
        "run_id": run_id,
        "result": result_to_dict(result, fragments),
    }
    json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return payload
