# File: backend/app/cli/solve_cli.py
# Version: v0.4.0

"""
Command-line interface for the overlap path solver.

Usage:
    python -m backend.app.cli.solve_cli \
        --fragments data/lines_with_numbers.txt \
        [--overlap 2] [--config solver.json] [--time-limit 30] \
        [--outdir out/] [--log-level INFO]

v0.4.0:
- Unreadable fragment sources (directory, bad encoding, permissions) take the
  same FATAL ERROR path as a missing file.

v0.3.0:
- --outdir writes <stem>_result.json and <stem>_path.csv next to the report.

v0.2.0:
- --time-limit stops the search early and reports the best chain found so far.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from backend.app.config.config_solver import SolverConfig, load_solver_config
from backend.app.core.assembly.overlap_graph import SolverError
from backend.app.core.assembly.overlap_path_solver import OverlapPathSolver
from backend.app.core.config import settings
from backend.app.core.export.csv_exporter import export_path_to_csv
from backend.app.core.export.json_exporter import export_result_to_json
from backend.app.core.models.fragment_loader import (
    FragmentSourceError,
    FragmentSourceNotFoundError,
    load_fragments,
)
from backend.app.core.reporting.console_report import START_BANNER, format_report


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Longest overlap chain of numeric fragments")
    p.add_argument("--fragments", type=Path, default=None,
                   help=f"Text file with numeric fragments (default: {settings.FRAGMENTS_PATH})")
    p.add_argument("--overlap", type=int, default=None,
                   help="Digits that must match between neighbours (overrides config)")
    p.add_argument("--config", type=Path, default=None, help="solver.json")
    p.add_argument("--time-limit", dest="time_limit", type=float, default=None,
                   help="Stop the search after this many seconds (default: no limit)")
    p.add_argument("--outdir", type=Path, default=None, help="Write JSON/CSV results here")
    p.add_argument("--log-level", dest="log_level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    return p


def _resolve_config(p: argparse.ArgumentParser, args: argparse.Namespace) -> SolverConfig:
    try:
        cfg = load_solver_config(args.config)
        if args.overlap is not None or args.time_limit is not None:
            cfg = SolverConfig(
                overlap_size=args.overlap if args.overlap is not None else cfg.overlap_size,
                border_size=cfg.border_size,
                time_limit_s=args.time_limit if args.time_limit is not None else cfg.time_limit_s,
            )
    except (OSError, ValueError) as e:
        p.error(f"invalid solver configuration: {e}")
    return cfg


def main(argv: Optional[List[str]] = None) -> None:
    p = _build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))
    log = logging.getLogger("solve_cli")

    cfg = _resolve_config(p, args)
    fragments_path = Path(args.fragments) if args.fragments else Path(settings.FRAGMENTS_PATH)
    log.info("FRAGMENTS=%s | OVERLAP=%d | TIME_LIMIT=%s | OUTDIR=%s",
             fragments_path, cfg.overlap_size,
             cfg.time_limit_s if cfg.time_limit_s is not None else "None",
             args.outdir if args.outdir else "None")

    print(START_BANNER)

    try:
        fragments = load_fragments(fragments_path)
    except FragmentSourceNotFoundError:
        print(f"FATAL ERROR: File not found at path: {fragments_path}", file=sys.stderr)
        raise SystemExit(1)
    except FragmentSourceError as e:
        print(f"FATAL ERROR: Cannot read fragments at path: {fragments_path} ({e.reason})",
              file=sys.stderr)
        raise SystemExit(1)

    print(f"Fragments loaded: {len(fragments)}")

    solver = OverlapPathSolver(
        fragments, cfg.overlap_size, time_limit_s=cfg.time_limit_s, logger=log
    )

    print("Finding the longest chain...")
    try:
        result = solver.solve_detailed()
    except SolverError as e:
        log.error("✗ Solve failed: %s", e)
        raise SystemExit(1)

    print(format_report(result.sequence, result.elapsed_ms, cfg.border_size))
    if result.interrupted:
        print(f"(time limit of {cfg.time_limit_s:g}s reached; best chain found so far)")

    if args.outdir:
        outdir = Path(args.outdir)
        outdir.mkdir(parents=True, exist_ok=True)
        stem = fragments_path.stem
        json_path = outdir / f"{stem}_result.json"
        csv_path = outdir / f"{stem}_path.csv"
        export_result_to_json(result, fragments, json_path, stem)
        export_path_to_csv(result, fragments, csv_path)
        log.info("Results written: %s, %s", json_path, csv_path)

    raise SystemExit(0)


if __name__ == "__main__":
    main()
