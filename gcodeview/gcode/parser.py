"""G-code line normalizer.

Strips comments and whitespace from raw toolpath text and splits each
instruction line into a canonical command token plus its argument tokens.
No machine state lives here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from gcodeview.config import DEFAULT_CONFIG, ViewerConfig
from gcodeview.utils.math_helpers import parse_finite


class _Unparseable:
    """Marker for an axis token whose numeric suffix could not be read."""

    _instance: _Unparseable | None = None

    def __new__(cls) -> _Unparseable:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNPARSEABLE"

    def __bool__(self) -> bool:
        return False


UNPARSEABLE = _Unparseable()


@dataclass(frozen=True)
class GCodeLine:
    """A single normalized instruction line."""

    line_number: int  # 1-based physical line in the source text
    command: str  # upper-cased first token, e.g. "G1"
    args: tuple[str, ...]  # remaining tokens, original case
    raw: str = ""  # the line with its comment stripped and whitespace trimmed

    def axis(self, letter: str) -> float | None | _Unparseable:
        """Look up the value of axis *letter* on this line.

        The first argument token whose upper-cased form starts with the
        letter wins.  Returns ``None`` when no such token exists and
        ``UNPARSEABLE`` when the remainder is not a finite number.
        """
        letter = letter.upper()
        for token in self.args:
            if token.upper().startswith(letter):
                value = parse_finite(token[len(letter):])
                return UNPARSEABLE if value is None else value
        return None


def parse_line(
    line: str,
    line_number: int = 0,
    config: ViewerConfig = DEFAULT_CONFIG,
) -> GCodeLine | None:
    """Normalize a single raw line.

    Parameters
    ----------
    line:
        Raw text, possibly including a trailing comment.
    line_number:
        Source line number (1-indexed by convention).
    config:
        Supplies the comment marker.

    Returns
    -------
    GCodeLine, or None if the line is empty or comment-only.
    """
    code_part = line.split(config.comment_marker, 1)[0].strip()
    if not code_part:
        return None

    tokens = code_part.split()
    return GCodeLine(
        line_number=line_number,
        command=tokens[0].upper(),
        args=tuple(tokens[1:]),
        raw=code_part,
    )


def iter_lines(
    gcode_text: str,
    config: ViewerConfig = DEFAULT_CONFIG,
) -> Iterator[GCodeLine]:
    """Yield normalized lines of *gcode_text*, skipping no-op lines.

    Line numbers count every physical line, blank ones included.
    """
    for idx, line in enumerate(gcode_text.split("\n"), start=1):
        parsed = parse_line(line, line_number=idx, config=config)
        if parsed is not None:
            yield parsed
