"""Layer helpers used by viewers to filter and colour segments by height."""

from __future__ import annotations

from typing import Sequence

from gcodeview.analysis.bounds import Bounds
from gcodeview.gcode.interpreter import Move
from gcodeview.utils.math_helpers import clamp, inverse_lerp


def layer_heights(paths: Sequence[Move]) -> list[float]:
    """Sorted distinct z values over both endpoints of every path segment."""
    return sorted({p.z for m in paths for p in (m.start, m.end)})


def default_layer_range(bounds: Bounds) -> tuple[float, float]:
    """Initial (z_min, z_max) filter covering the whole part."""
    return bounds.min[2], bounds.max[2]


def filter_by_z(moves: Sequence[Move], z_min: float, z_max: float) -> list[Move]:
    """Moves whose start height lies in the inclusive range [*z_min*, *z_max*]."""
    if z_min > z_max:
        raise ValueError(f"z_min ({z_min}) must not exceed z_max ({z_max})")
    return [m for m in moves if z_min <= m.start.z <= z_max]


def z_fraction(move: Move, bounds: Bounds) -> float:
    """Relative height of *move*'s start within *bounds*, in [0, 1].

    Flat parts (no z range) map to 0.
    """
    t = inverse_lerp(bounds.min[2], bounds.max[2], move.start.z)
    return clamp(t, 0.0, 1.0)
