#!/usr/bin/env python3
"""Inspect a G-code file: statistics, bounds and per-line diagnostics.

Usage:
    python scripts/inspect_gcode.py part.gcode [--json] [--plot] [--show-travel]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Ensure package is importable when running from the scripts/ directory
# ---------------------------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_PROJECT_ROOT))

from gcodeview.analysis import calculate_bounds, get_statistics, layer_heights
from gcodeview.config import DEFAULT_CONFIG
from gcodeview.gcode import ParseResult, parse_gcode


def build_report(result: ParseResult) -> dict:
    """Collect everything the report prints for an interpreted file."""
    stats = get_statistics(result.paths, result.moves)
    bounds = calculate_bounds(result.paths)
    heights = layer_heights(result.paths)
    return {
        "statistics": stats.to_display(DEFAULT_CONFIG),
        "bounds": {"min": list(bounds.min), "max": list(bounds.max)},
        "z_levels": [heights[0], heights[-1]] if heights else [],
        "diagnostics": [
            {"line": d.line_number, "text": d.raw_text, "issue": d.issue_kind, "axis": d.axis}
            for d in result.diagnostics
        ],
    }


def print_report(path: Path, report: dict) -> None:
    stats = report["statistics"]
    bounds = report["bounds"]
    print("=" * 60)
    print(f"G-code report: {path.name}")
    print("=" * 60)
    print(f"  Layers:             {stats['layer_count']}")
    print(f"  Moves:              {stats['total_moves']}")
    print(f"  Extrusion moves:    {stats['extrusion_moves']}")
    print(f"  Travel moves:       {stats['travel_moves']}")
    print(f"  Total distance:     {stats['total_distance']} mm")
    print(f"  Extrusion distance: {stats['extrusion_distance']} mm")
    print(f"  Bounds min:         ({', '.join(f'{v:.2f}' for v in bounds['min'])})")
    print(f"  Bounds max:         ({', '.join(f'{v:.2f}' for v in bounds['max'])})")
    if report["diagnostics"]:
        print(f"\n  {len(report['diagnostics'])} diagnostic(s):")
        for diag in report["diagnostics"]:
            print(f"    line {diag['line']}: {diag['issue']} ({diag['axis'].upper()}) {diag['text']}")


def main():
    parser = argparse.ArgumentParser(description="Inspect a G-code toolpath")
    parser.add_argument("file", type=Path, help="G-code file to read")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--plot", action="store_true", help="Open a 3-D preview")
    parser.add_argument("--show-travel", action="store_true",
                        help="Overlay travel moves in the preview")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    text = args.file.read_text(encoding="utf-8", errors="replace")
    result = parse_gcode(text)
    report = build_report(result)

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print_report(args.file, report)

    if args.plot:
        from gcodeview.render import ToolpathPreview

        preview = ToolpathPreview()
        preview.draw(result, show_travel=args.show_travel)
        preview.show()


if __name__ == "__main__":
    main()
