"""Interpret G-code toolpaths into ordered motion segments and summarise them."""

from gcodeview.config import DEFAULT_CONFIG, ViewerConfig
from gcodeview.gcode import Move, ParseResult, Position, parse_gcode
from gcodeview.analysis import Bounds, Statistics, calculate_bounds, get_statistics

__all__ = [
    "DEFAULT_CONFIG",
    "ViewerConfig",
    "Move",
    "ParseResult",
    "Position",
    "parse_gcode",
    "Bounds",
    "Statistics",
    "calculate_bounds",
    "get_statistics",
]
