#!/usr/bin/env python3
"""
Micro-benchmark for CLOB View rendering.

Tests:
1. Side-by-side render speed
2. Stacked render speed
3. Unlimited depth render speed (height <= 0)

Usage:
    python -m clob_view.benchmark
"""

from __future__ import annotations

import random
import time
from statistics import mean, stdev

from .datafeed.snapshot import mock_book
from .model import ClobModel
from .types import Orientation, Viewport


def benchmark_render(
    title: str,
    orientation: Orientation,
    viewport: Viewport,
    levels: int = 1000,
    iterations: int = 500,
) -> None:
    """Benchmark repeated renders of one model state."""
    print(f"\n=== {title} ===")

    model = ClobModel()
    model.book = mock_book(levels, rng=random.Random(42))
    model.orientation = orientation

    # Warm up
    for _ in range(10):
        model.view_with_options(viewport)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        model.view_with_options(viewport)
        times.append(time.perf_counter() - start)

    avg_time = mean(times) * 1000
    std_time = stdev(times) * 1000

    print(f"  Levels per side: {levels:,}")
    print(f"  Viewport: {viewport.width}x{viewport.height}")
    print(f"  Iterations: {iterations}")
    print(f"  Avg time: {avg_time:.3f}ms")
    print(f"  Std dev: {std_time:.3f}ms")
    print(f"  Max FPS possible: {1000/avg_time:,.0f}")


def main() -> None:
    """Run all benchmarks."""
    print("=" * 60)
    print("CLOB View Render Benchmark")
    print("=" * 60)

    benchmark_render("Side-by-Side Render", Orientation.SIDE_BY_SIDE, Viewport(120, 40))
    benchmark_render("Stacked Render", Orientation.STACKED, Viewport(60, 41))
    benchmark_render("Unlimited Depth Render", Orientation.SIDE_BY_SIDE, Viewport(120, 0), iterations=100)

    print("\n" + "=" * 60)
    print("Benchmark complete.")
    print("=" * 60)


if __name__ == "__main__":
    main()
