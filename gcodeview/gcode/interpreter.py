"""G-code command interpreter.

Folds normalized lines, in order, over an immutable interpreter state
(position register plus coordinate mode) and emits at most one ``Move``
per line.  Motion lines are classified as extrusion or travel on the way.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Iterator

from gcodeview.config import DEFAULT_CONFIG, ViewerConfig
from gcodeview.gcode.commands import (
    AXES,
    AxisWords,
    Command,
    CoordinateMode,
    Home,
    Motion,
    MotionKind,
    SetMode,
    SetPosition,
    Unsupported,
    decode,
)
from gcodeview.gcode.parser import GCodeLine, iter_lines, parse_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    """Machine coordinates in mm; ``e`` is cumulative filament feed."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    e: float = 0.0


@dataclass(frozen=True)
class Move:
    """One motion segment, captured as two immutable position snapshots."""

    start: Position
    end: Position
    kind: MotionKind
    is_extrusion: bool
    line_number: int
    raw_text: str


@dataclass(frozen=True)
class Diagnostic:
    """A per-line issue that did not stop interpretation."""

    line_number: int
    raw_text: str
    issue_kind: str  # "unparseable_axis" or "non_finite_result"
    axis: str = ""


@dataclass(frozen=True)
class InterpreterState:
    position: Position = field(default_factory=Position)
    mode: CoordinateMode = CoordinateMode.ABSOLUTE


INITIAL_STATE = InterpreterState()


@dataclass(frozen=True)
class StepResult:
    state: InterpreterState
    move: Move | None = None
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class ParseResult:
    """Output of one interpretation pass.

    ``paths`` is the extrusion subsequence of ``moves``; it holds the very
    same ``Move`` objects, in the same order.
    """

    moves: tuple[Move, ...] = ()
    paths: tuple[Move, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()


# ----------------------------------------------------------------------
# Pure step function
# ----------------------------------------------------------------------

def _axis_diagnostics(
    line: GCodeLine, axes: AxisWords, overflowed: tuple[str, ...] = ()
) -> tuple[Diagnostic, ...]:
    return tuple(
        Diagnostic(line.line_number, line.raw, "unparseable_axis", axis)
        for axis in axes.unparseable
    ) + tuple(
        Diagnostic(line.line_number, line.raw, "non_finite_result", axis)
        for axis in overflowed
    )


def _log_diagnostics(diagnostics: Iterable[Diagnostic]) -> None:
    for diag in diagnostics:
        if diag.issue_kind == "non_finite_result":
            logger.warning(
                "Line %d: %s leaves the finite range in %r, axis left unchanged",
                diag.line_number, diag.axis.upper(), diag.raw_text,
            )
        else:
            logger.warning(
                "Line %d: unparseable %s value in %r, axis left unchanged",
                diag.line_number, diag.axis.upper(), diag.raw_text,
            )


def _apply_axes(
    prior: Position, axes: AxisWords, mode: CoordinateMode
) -> tuple[Position, tuple[str, ...]]:
    """New register value plus the axes whose result overflowed and were kept."""
    values = {}
    overflowed = []
    for axis in AXES:
        given = getattr(axes, axis)
        current = getattr(prior, axis)
        if given is None:
            values[axis] = current
        elif mode is CoordinateMode.RELATIVE:
            total = current + given
            if math.isfinite(total):
                values[axis] = total
            else:
                overflowed.append(axis)
                values[axis] = current
        else:
            values[axis] = given
    return Position(**values), tuple(overflowed)


def _step_set_mode(state: InterpreterState, command: SetMode, line: GCodeLine) -> StepResult:
    return StepResult(replace(state, mode=command.mode))


def _step_motion(state: InterpreterState, command: Motion, line: GCodeLine) -> StepResult:
    prior = state.position
    target, overflowed = _apply_axes(prior, command.axes, state.mode)

    # Equal or lower E (a retraction) is travel.
    is_extrusion = command.axes.e is not None and target.e > prior.e

    move = Move(
        start=prior,
        end=target,
        kind=command.kind,
        is_extrusion=is_extrusion,
        line_number=line.line_number,
        raw_text=line.raw,
    )
    return StepResult(
        replace(state, position=target),
        move,
        _axis_diagnostics(line, command.axes, overflowed),
    )


def _step_home(state: InterpreterState, command: Home, line: GCodeLine) -> StepResult:
    homed = Position(0.0, 0.0, 0.0, state.position.e)
    return StepResult(replace(state, position=homed))


def _step_set_position(
    state: InterpreterState, command: SetPosition, line: GCodeLine
) -> StepResult:
    # Always an absolute write, whatever the current mode.
    position, _ = _apply_axes(state.position, command.axes, CoordinateMode.ABSOLUTE)
    return StepResult(
        replace(state, position=position),
        diagnostics=_axis_diagnostics(line, command.axes),
    )


def _step_unsupported(
    state: InterpreterState, command: Unsupported, line: GCodeLine
) -> StepResult:
    logger.debug("Line %d: ignoring unsupported command %s", line.line_number, command.command)
    return StepResult(state)


_HANDLERS: dict[type, Callable[[InterpreterState, Command, GCodeLine], StepResult]] = {
    SetMode: _step_set_mode,
    Motion: _step_motion,
    Home: _step_home,
    SetPosition: _step_set_position,
    Unsupported: _step_unsupported,
}


def step(state: InterpreterState, line: GCodeLine) -> StepResult:
    """Apply one normalized line to *state*.

    Returns the new state, the emitted ``Move`` (motion commands only) and
    any diagnostics raised by the line.  *state* itself is never modified.
    """
    command = decode(line)
    return _HANDLERS[type(command)](state, command, line)


# ----------------------------------------------------------------------
# Stateful wrapper
# ----------------------------------------------------------------------

class GCodeInterpreter:
    """Incremental driver around :func:`step`.

    Feed lines one at a time (e.g. while streaming a large file) or hand
    over a whole sequence; both paths give identical results.

    Typical usage::

        interp = GCodeInterpreter()
        for line in iter_lines(text):
            interp.feed(line)
        result = interp.result()
    """

    def __init__(self) -> None:
        self.state: InterpreterState = INITIAL_STATE
        self._moves: list[Move] = []
        self._diagnostics: list[Diagnostic] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def feed(self, line: GCodeLine) -> Move | None:
        """Interpret one line and return the ``Move`` it produced, if any."""
        outcome = step(self.state, line)
        self.state = outcome.state
        _log_diagnostics(outcome.diagnostics)
        self._diagnostics.extend(outcome.diagnostics)
        if outcome.move is not None:
            self._moves.append(outcome.move)
        return outcome.move

    def interpret_lines(self, lines: Iterable[GCodeLine]) -> ParseResult:
        """Interpret every line of *lines* in order and return the result so far."""
        for line in lines:
            self.feed(line)
        return self.result()

    def result(self) -> ParseResult:
        moves = tuple(self._moves)
        paths = tuple(m for m in moves if m.is_extrusion)
        logger.debug(
            "Interpreted %d moves (%d extrusion), %d diagnostics",
            len(moves), len(paths), len(self._diagnostics),
        )
        return ParseResult(moves, paths, tuple(self._diagnostics))

    def reset(self) -> None:
        """Discard the register, the mode and everything collected so far."""
        self.state = INITIAL_STATE
        self._moves = []
        self._diagnostics = []


def iter_moves(
    raw_lines: Iterable[str],
    config: ViewerConfig = DEFAULT_CONFIG,
) -> Iterator[Move]:
    """Lazily interpret *raw_lines* (e.g. an open file) and yield each ``Move``.

    Only the current state is held between lines, so memory stays flat
    however long the input is.  Diagnostics are logged but not returned;
    use :func:`parse_gcode` or :class:`GCodeInterpreter` to collect them.
    """
    state = INITIAL_STATE
    for idx, raw in enumerate(raw_lines, start=1):
        line = parse_line(raw, line_number=idx, config=config)
        if line is None:
            continue
        outcome = step(state, line)
        state = outcome.state
        _log_diagnostics(outcome.diagnostics)
        if outcome.move is not None:
            yield outcome.move


def parse_gcode(gcode_text: str, config: ViewerConfig = DEFAULT_CONFIG) -> ParseResult:
    """Interpret a complete toolpath program held in memory."""
    return GCodeInterpreter().interpret_lines(iter_lines(gcode_text, config))
