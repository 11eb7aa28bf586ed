from gcodeview.gcode.parser import UNPARSEABLE, GCodeLine, iter_lines, parse_line
from gcodeview.gcode.commands import CoordinateMode, MotionKind, decode
from gcodeview.gcode.interpreter import (
    INITIAL_STATE,
    Diagnostic,
    GCodeInterpreter,
    InterpreterState,
    Move,
    ParseResult,
    Position,
    iter_moves,
    parse_gcode,
    step,
)

__all__ = [
    "UNPARSEABLE",
    "GCodeLine",
    "iter_lines",
    "parse_line",
    "CoordinateMode",
    "MotionKind",
    "decode",
    "INITIAL_STATE",
    "Diagnostic",
    "GCodeInterpreter",
    "InterpreterState",
    "Move",
    "ParseResult",
    "Position",
    "iter_moves",
    "parse_gcode",
    "step",
]
