"""Summary statistics over an interpreted toolpath."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from gcodeview.config import DEFAULT_CONFIG, ViewerConfig
from gcodeview.gcode.interpreter import Move
from gcodeview.utils.math_helpers import segment_lengths


@dataclass(frozen=True)
class Statistics:
    """Counts and distances for one toolpath.

    Distances are kept at full precision; use :meth:`to_display` for the
    rounded values shown to users.
    """

    layer_count: int = 0
    total_moves: int = 0
    extrusion_moves: int = 0
    travel_moves: int = 0
    total_distance: float = 0.0  # mm
    extrusion_distance: float = 0.0  # mm

    def to_display(self, config: ViewerConfig = DEFAULT_CONFIG) -> dict[str, int | str]:
        """Counts as-is and distances formatted with ``display_decimals`` digits."""
        digits = config.display_decimals
        return {
            "layer_count": self.layer_count,
            "total_moves": self.total_moves,
            "extrusion_moves": self.extrusion_moves,
            "travel_moves": self.travel_moves,
            "total_distance": f"{self.total_distance:.{digits}f}",
            "extrusion_distance": f"{self.extrusion_distance:.{digits}f}",
        }


def _distance(moves: Sequence[Move]) -> float:
    if not moves:
        return 0.0
    starts = np.array([(m.start.x, m.start.y, m.start.z) for m in moves], dtype=float)
    ends = np.array([(m.end.x, m.end.y, m.end.z) for m in moves], dtype=float)
    return float(segment_lengths(starts, ends).sum())


def get_statistics(paths: Sequence[Move], moves: Sequence[Move]) -> Statistics:
    """Aggregate *moves* and their extrusion subsequence *paths*.

    Every path endpoint contributes its z to the layer set, so an
    extrusion segment that climbs in z counts both heights.
    """
    layers = {p.z for m in paths for p in (m.start, m.end)}

    extrusion_distance = _distance(paths)
    travel_distance = _distance([m for m in moves if not m.is_extrusion])

    return Statistics(
        layer_count=len(layers),
        total_moves=len(moves),
        extrusion_moves=len(paths),
        travel_moves=len(moves) - len(paths),
        total_distance=extrusion_distance + travel_distance,
        extrusion_distance=extrusion_distance,
    )
