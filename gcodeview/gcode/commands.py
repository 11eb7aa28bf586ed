"""Decoded command variants.

Each normalized line is decoded exactly once into one of the command
types below, so the interpreter never rescans raw tokens while it
updates its register.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from gcodeview.gcode.parser import UNPARSEABLE, GCodeLine

AXES: tuple[str, ...] = ("x", "y", "z", "e")


class CoordinateMode(Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class MotionKind(Enum):
    RAPID = "G0"
    LINEAR = "G1"


@dataclass(frozen=True)
class AxisWords:
    """Typed axis payload of a motion or set-position command.

    ``None`` means the axis was not given.  ``unparseable`` lists axes
    whose token was present but carried no usable number; those are
    treated as absent.
    """

    x: float | None = None
    y: float | None = None
    z: float | None = None
    e: float | None = None
    unparseable: tuple[str, ...] = ()


@dataclass(frozen=True)
class SetMode:
    mode: CoordinateMode


@dataclass(frozen=True)
class Motion:
    kind: MotionKind
    axes: AxisWords


@dataclass(frozen=True)
class Home:
    pass


@dataclass(frozen=True)
class SetPosition:
    axes: AxisWords


@dataclass(frozen=True)
class Unsupported:
    command: str


Command = Union[SetMode, Motion, Home, SetPosition, Unsupported]


def read_axes(line: GCodeLine) -> AxisWords:
    """Collect the X/Y/Z/E words of *line* into an ``AxisWords`` payload."""
    values: dict[str, float | None] = {}
    bad: list[str] = []
    for axis in AXES:
        value = line.axis(axis)
        if value is UNPARSEABLE:
            bad.append(axis)
            value = None
        values[axis] = value
    return AxisWords(**values, unparseable=tuple(bad))


_DECODERS: dict[str, Callable[[GCodeLine], Command]] = {
    "G0": lambda line: Motion(MotionKind.RAPID, read_axes(line)),
    "G1": lambda line: Motion(MotionKind.LINEAR, read_axes(line)),
    "G28": lambda line: Home(),
    "G90": lambda line: SetMode(CoordinateMode.ABSOLUTE),
    "G91": lambda line: SetMode(CoordinateMode.RELATIVE),
    "G92": lambda line: SetPosition(read_axes(line)),
}


def decode(line: GCodeLine) -> Command:
    """Decode a normalized line into its command variant.

    Anything without an entry in the lookup table becomes ``Unsupported``.
    """
    decoder = _DECODERS.get(line.command)
    if decoder is None:
        return Unsupported(line.command)
    return decoder(line)
