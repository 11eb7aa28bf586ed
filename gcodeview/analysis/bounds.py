"""Axis-aligned bounding box over the extrusion path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from gcodeview.gcode.interpreter import Move


@dataclass(frozen=True)
class Bounds:
    """Axis-independent min/max corners, each as an ``(x, y, z)`` tuple."""

    min: tuple[float, float, float] = (0.0, 0.0, 0.0)
    max: tuple[float, float, float] = (0.0, 0.0, 0.0)

    @property
    def size(self) -> tuple[float, float, float]:
        return tuple(hi - lo for lo, hi in zip(self.min, self.max))

    @property
    def center(self) -> tuple[float, float, float]:
        return tuple((lo + hi) / 2.0 for lo, hi in zip(self.min, self.max))

    @property
    def largest_extent(self) -> float:
        return max(self.size)


def endpoints(moves: Sequence[Move]) -> np.ndarray:
    """Stack both endpoints of every move into a ``(2N, 3)`` xyz array."""
    if not moves:
        return np.zeros((0, 3))
    return np.array(
        [(p.x, p.y, p.z) for m in moves for p in (m.start, m.end)],
        dtype=float,
    )


def calculate_bounds(paths: Sequence[Move]) -> Bounds:
    """Bounding box of every endpoint in *paths*.

    An empty path gives the degenerate box at the origin rather than
    infinite sentinels.
    """
    if not paths:
        return Bounds()

    points = endpoints(paths)
    lo = points.min(axis=0)
    hi = points.max(axis=0)
    return Bounds(
        min=(float(lo[0]), float(lo[1]), float(lo[2])),
        max=(float(hi[0]), float(hi[1]), float(hi[2])),
    )
