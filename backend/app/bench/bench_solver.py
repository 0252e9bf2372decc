# File: backend/app/bench/bench_solver.py
# Version: v0.1.0

"""
Micro-benchmarks for the overlap path solver hot paths.

Usage:
    PYTHONPATH=$(pwd) python backend/app/bench/bench_solver.py

What it measures:
- Overlap graph construction over N random fragments
- Exhaustive longest-path search on a sparse random graph
- Search on a dense graph (every fragment chains to every other), capped
  with a time limit since the full search is factorial

Tune N/K and fragment lengths to your real workloads.
"""

from __future__ import annotations

import random
import time
from statistics import mean

from backend.app.core.assembly.overlap_graph import build_overlap_graph
from backend.app.core.assembly.overlap_path_solver import OverlapPathSolver


def rand_digits(n: int) -> str:
    return "".join(random.choice("0123456789") for _ in range(n))


def timeit(fn, repeat=5):
    times = []
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn()
        times.append(time.perf_counter() - t0)
    return min(times), mean(times)


def bench_graph(n_fragments=400, frag_len=8, k=2):
    fragments = [rand_digits(frag_len) for _ in range(n_fragments)]
    def run():
        _ = build_overlap_graph(fragments, k)
    return timeit(run)


def bench_search_sparse(n_fragments=60, frag_len=6, k=2):
    fragments = [rand_digits(frag_len) for _ in range(n_fragments)]
    def run():
        _ = OverlapPathSolver(fragments, k).solve()
    return timeit(run, repeat=3)


def bench_search_dense(n_fragments=12, time_limit_s=2.0):
    # "1x...x1" chains to every other fragment with k=1
    fragments = ["1" + rand_digits(3) + "1" for _ in range(n_fragments)]
    solver = OverlapPathSolver(fragments, 1, time_limit_s=time_limit_s)
    t0 = time.perf_counter()
    res = solver.solve_detailed()
    return time.perf_counter() - t0, res.interrupted, len(res.path)


def main():
    random.seed(1337)
    print("== overlap solver micro-bench ==")
    best, avg = bench_graph()
    print(f"graph build:        best {best:.3f}s, avg {avg:.3f}s")
    best, avg = bench_search_sparse()
    print(f"sparse search:      best {best:.3f}s, avg {avg:.3f}s")
    took, interrupted, n_path = bench_search_dense()
    print(f"dense search:       {took:.3f}s, path {n_path} node(s), interrupted={interrupted}")


if __name__ == "__main__":
    main()
