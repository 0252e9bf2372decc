# File: backend/app/core/reporting/console_report.py
# Version: v0.1.1
"""
Plain-text final report for the CLI.
"""
from __future__ import annotations

from typing import List

START_BANNER = ">>> START PUZZLE CONNECTION <<<"


def format_report(result: str, elapsed_ms: float, border_size: int = 40) -> str:
    border = "=" * border_size
    lines: List[str] = ["", border, " FINAL REPORT", border]
    if not result:
        lines.append("No solution found.")
    else:
        lines.append(f"Execution time: {int(round(elapsed_ms))} ms")
        lines.append(f"Result length: {len(result)} digits")
        lines.append("Result:")
        lines.append(result)
    lines.append(border)
    return "\n".join(lines)
