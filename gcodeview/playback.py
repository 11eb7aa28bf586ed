"""Progressive reveal of a toolpath, one extrusion segment index at a time."""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from gcodeview.config import DEFAULT_CONFIG

T = TypeVar("T")


class PlaybackCursor:
    """Ordinal cursor over a Path sequence.

    ``frame`` is the index of the last revealed segment.  Each
    :meth:`advance` moves forward by ``max(1, floor(speed))`` segments and
    stops on the last index.
    """

    def __init__(self, total: int, speed: float = DEFAULT_CONFIG.playback_speed) -> None:
        if total < 0:
            raise ValueError(f"total must be >= 0, got {total}")
        self.total = total
        self.frame = 0
        self.speed = speed

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"speed must be >= 0, got {value}")
        self._speed = value

    @property
    def last_index(self) -> int:
        return max(self.total - 1, 0)

    @property
    def done(self) -> bool:
        return self.total == 0 or self.frame >= self.last_index

    def advance(self) -> int:
        if not self.done:
            stride = max(1, math.floor(self._speed))
            self.frame = min(self.frame + stride, self.last_index)
        return self.frame

    def seek(self, frame: int) -> int:
        self.frame = min(max(frame, 0), self.last_index)
        return self.frame

    def reset(self) -> None:
        self.frame = 0

    def visible(self, paths: Sequence[T]) -> Sequence[T]:
        """Segments revealed so far (index <= frame)."""
        if self.total == 0:
            return paths[:0]
        return paths[: self.frame + 1]
