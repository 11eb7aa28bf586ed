#!/usr/bin/env python3
"""Benchmark interpretation and aggregation speed on generated programs."""

import argparse
import sys
import time
from pathlib import Path

# ---------------------------------------------------------------------------
# Ensure package is importable when running from the scripts/ directory
# ---------------------------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_PROJECT_ROOT))

from gcodeview.analysis import calculate_bounds, get_statistics
from gcodeview.gcode import parse_gcode
from gcodeview.gcode.library import calibration_cube_gcode, spiral_vase_gcode


def benchmark(name: str, gcode: str, repeats: int) -> None:
    num_lines = gcode.count("\n")

    start = time.perf_counter()
    for _ in range(repeats):
        result = parse_gcode(gcode)
    parse_elapsed = (time.perf_counter() - start) / repeats

    start = time.perf_counter()
    for _ in range(repeats):
        calculate_bounds(result.paths)
        get_statistics(result.paths, result.moves)
    analysis_elapsed = (time.perf_counter() - start) / repeats

    print(f"\n{name}")
    print(f"  Lines: {num_lines:,}  Moves: {len(result.moves):,}  Paths: {len(result.paths):,}")
    print(f"  Parse:    {parse_elapsed * 1000:.2f} ms ({num_lines / max(parse_elapsed, 1e-9):,.0f} lines/s)")
    print(f"  Analysis: {analysis_elapsed * 1000:.2f} ms")


def main():
    parser = argparse.ArgumentParser(description="Benchmark gcodeview interpretation")
    parser.add_argument("--repeats", type=int, default=5)
    parser.add_argument("--layers", type=int, default=200)
    args = parser.parse_args()

    print("=" * 60)
    print("gcodeview Interpreter Benchmark")
    print("=" * 60)

    benchmark("Calibration cube", calibration_cube_gcode(num_layers=args.layers), args.repeats)
    benchmark("Spiral vase", spiral_vase_gcode(height=args.layers * 0.2), args.repeats)

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
