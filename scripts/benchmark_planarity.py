#!/usr/bin/env python3
"""
Benchmark the planarity search on generated graph families.

Usage:
    uv run python scripts/benchmark_planarity.py [--graphs PATTERN] [--repeat N]

Examples:
    uv run python scripts/benchmark_planarity.py
    uv run python scripts/benchmark_planarity.py --graphs "wheel_*"
    uv run python scripts/benchmark_planarity.py --repeat 5 --output results.json
"""

from __future__ import annotations

import argparse
import json
import time
from fnmatch import fnmatch
from typing import Any, Callable

from graph_planarity import (
    Graph,
    PlanaritySearch,
    is_maximally_planar,
    snapshot,
)


def complete(n: int) -> Graph:
    return Graph.from_edges(n, [(i, j) for i in range(n) for j in range(i + 1, n)])


def complete_bipartite(a: int, b: int) -> Graph:
    return Graph.from_edges(a + b, [(i, a + j) for i in range(a) for j in range(b)])


def wheel(n: int) -> Graph:
    edges = []
    for i in range(1, n + 1):
        edges.append((0, i))
        edges.append((i, 1 + (i % n)))
    return Graph.from_edges(n + 1, edges)


def grid(rows: int, cols: int) -> Graph:
    edges = []
    for r in range(rows):
        for c in range(cols):
            v = r * cols + c
            if c + 1 < cols:
                edges.append((v, v + 1))
            if r + 1 < rows:
                edges.append((v, v + cols))
    return Graph.from_edges(rows * cols, edges)


def petersen() -> Graph:
    outer = [(i, (i + 1) % 5) for i in range(5)]
    inner = [(5 + i, 5 + (i + 2) % 5) for i in range(5)]
    spokes = [(i, i + 5) for i in range(5)]
    return Graph.from_edges(10, outer + inner + spokes)


def icosahedron() -> Graph:
    upper = [(0, i) for i in range(1, 6)] + [(i, i % 5 + 1) for i in range(1, 6)]
    lower = [(11, 6 + i) for i in range(5)] + [(6 + i, 6 + (i + 1) % 5) for i in range(5)]
    band = [(i, i + 5) for i in range(1, 6)] + [(i, i % 5 + 6) for i in range(1, 6)]
    return Graph.from_edges(12, upper + lower + band)


GRAPHS: dict[str, Callable[[], Graph]] = {
    "complete_5": lambda: complete(5),
    "complete_8": lambda: complete(8),
    "bipartite_3_3": lambda: complete_bipartite(3, 3),
    "bipartite_2_6": lambda: complete_bipartite(2, 6),
    "wheel_6": lambda: wheel(6),
    "wheel_10": lambda: wheel(10),
    "grid_3x3": lambda: grid(3, 3),
    "grid_3x4": lambda: grid(3, 4),
    "petersen": petersen,
    "icosahedron": icosahedron,
}


def benchmark_graph(graph: Graph, repeat: int) -> dict[str, Any]:
    """
    Time the planarity search on one graph.

    Returns:
        Dict with timing, verdicts and cache statistics of the last run
    """
    if repeat < 1:
        raise ValueError(f"repeat must be >= 1, got {repeat}")

    state = snapshot(graph)
    timings = []

    for _ in range(repeat):
        # Fresh search each time so the cache does not carry over
        search = PlanaritySearch()
        start = time.perf_counter()
        planar = search.run(state)
        timings.append(time.perf_counter() - start)

    return {
        "time_seconds": min(timings),
        "num_nodes": state.num_vertices,
        "num_edges": state.num_edges,
        "planar": planar,
        "maximally_planar": is_maximally_planar(graph),
        "states": len(search.cache),
        "cache_hits": search.cache.hits,
    }


def run_benchmarks(graph_pattern: str = "*", repeat: int = 3) -> list[dict]:
    """Run benchmarks on matching graphs."""
    matching = [name for name in GRAPHS if fnmatch(name, graph_pattern)]
    if not matching:
        print(f"No graphs matching pattern '{graph_pattern}'")
        return []

    print(f"\nBenchmarking planarity on {len(matching)} graphs (best of {repeat})")
    print("=" * 80)
    print(f"{'Graph':<16s}{'n':>5s}{'m':>5s}{'planar':>8s}{'maximal':>9s}{'states':>9s}{'hits':>8s}{'time':>12s}")
    print("-" * 80)

    results = []
    for name in matching:
        result = benchmark_graph(GRAPHS[name](), repeat)
        print(
            f"{name:<16s}{result['num_nodes']:>5d}{result['num_edges']:>5d}"
            f"{str(result['planar']):>8s}{str(result['maximally_planar']):>9s}"
            f"{result['states']:>9d}{result['cache_hits']:>8d}{result['time_seconds']:>12.4f}"
        )
        results.append({"graph": name, **result})

    return results


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    count = int(value)
    if count < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {count}")
    return count


def main():
    parser = argparse.ArgumentParser(description="Benchmark the planarity search")
    parser.add_argument("--graphs", default="*", help="Graph name pattern (e.g., 'wheel_*')")
    parser.add_argument("--repeat", type=positive_int, default=3, help="Runs per graph; the best time is kept")
    parser.add_argument("--output", help="Output JSON file for results")

    args = parser.parse_args()

    results = run_benchmarks(graph_pattern=args.graphs, repeat=args.repeat)

    if args.output and results:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
