"""Utility math functions for toolpath analysis."""

from __future__ import annotations

import math
import re

import numpy as np

# Plain decimal with optional exponent; ASCII digits only, no underscores
_NUMBER_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp *value* to the interval [*min_val*, *max_val*]."""
    return float(np.clip(value, min_val, max_val))


def inverse_lerp(a: float, b: float, value: float) -> float:
    """Return the interpolation parameter *t* such that ``a + (b - a) * t == value``.

    Returns 0.0 when ``a == b`` to avoid division by zero.
    """
    if b == a:
        return 0.0
    return (value - a) / (b - a)


def segment_lengths(starts: np.ndarray, ends: np.ndarray) -> np.ndarray:
    """Euclidean length of each segment given ``(N, 3)`` start and end arrays."""
    if len(starts) == 0:
        return np.zeros(0)
    return np.linalg.norm(ends - starts, axis=1)


def parse_finite(text: str) -> float | None:
    """Parse *text* as a finite G-code number, returning ``None`` when it is not one."""
    if _NUMBER_RE.fullmatch(text) is None:
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value
