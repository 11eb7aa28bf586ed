"""Tests for the G-code line normalizer and command decoding."""
import pytest
from gcodeview.config import ViewerConfig
from gcodeview.gcode.parser import UNPARSEABLE, iter_lines, parse_line
from gcodeview.gcode.commands import (
    CoordinateMode,
    Home,
    Motion,
    MotionKind,
    SetMode,
    SetPosition,
    Unsupported,
    decode,
)


class TestParseLine:
    def test_parse_g1_move(self):
        line = parse_line("G1 X10.5 Y20.0 E0.5 F1200", 1)
        assert line is not None
        assert line.command == "G1"
        assert line.line_number == 1
        assert line.axis("X") == 10.5
        assert line.axis("Y") == 20.0
        assert line.axis("E") == 0.5
        assert line.axis("Z") is None

    def test_comment_only(self):
        assert parse_line("; this is a comment", 1) is None

    def test_empty_and_whitespace(self):
        assert parse_line("", 1) is None
        assert parse_line("   \t ", 1) is None

    def test_inline_comment_stripped(self):
        line = parse_line("  G1 X10 ; move to X10 E99", 1)
        assert line.raw == "G1 X10"
        assert line.axis("X") == 10.0
        assert line.axis("E") is None

    def test_command_case_folded(self):
        line = parse_line("g1 x5 e0.2", 1)
        assert line.command == "G1"
        assert line.axis("X") == 5.0
        assert line.axis("e") == 0.2

    def test_first_matching_token_wins(self):
        line = parse_line("G1 X1 X2", 1)
        assert line.axis("X") == 1.0

    def test_tabs_split_tokens(self):
        line = parse_line("G1\tX3\tY4", 1)
        assert line.axis("X") == 3.0
        assert line.axis("Y") == 4.0

    def test_negative_and_signed_values(self):
        line = parse_line("G92 X-1.25 E+0.5", 1)
        assert line.axis("X") == -1.25
        assert line.axis("E") == 0.5

    @pytest.mark.parametrize(
        "token", ["Xabc", "X", "X1.2.3", "Xnan", "Xinf", "X1_0", "X\u0661\u0662", "X1e999", "X0x1A"]
    )
    def test_unparseable_axis(self, token):
        line = parse_line(f"G1 {token} Y2", 1)
        assert line.axis("X") is UNPARSEABLE
        assert line.axis("Y") == 2.0

    @pytest.mark.parametrize(
        "token, expected",
        [("X1.", 1.0), ("X.5", 0.5), ("X-2e3", -2000.0), ("X+007", 7.0), ("X1E-2", 0.01)],
    )
    def test_accepted_number_forms(self, token, expected):
        line = parse_line(f"G1 {token}", 1)
        assert line.axis("X") == pytest.approx(expected)

    def test_custom_comment_marker(self):
        config = ViewerConfig(comment_marker="#")
        line = parse_line("G1 X1 # note", 1, config)
        assert line.raw == "G1 X1"
        assert parse_line("# only a note", 2, config) is None

    def test_empty_comment_marker_rejected(self):
        with pytest.raises(ValueError):
            ViewerConfig(comment_marker="")


class TestIterLines:
    def test_line_numbers_count_blank_lines(self):
        text = "G28\n\n; comment\nG1 X1\n"
        numbers = [line.line_number for line in iter_lines(text)]
        assert numbers == [1, 4]

    def test_crlf_line_endings(self):
        lines = list(iter_lines("G1 X1\r\nG1 X2\r\n"))
        assert [line.raw for line in lines] == ["G1 X1", "G1 X2"]


class TestDecode:
    def _decode(self, text):
        return decode(parse_line(text, 1))

    def test_motion_variants(self):
        rapid = self._decode("G0 X1")
        linear = self._decode("G1 Y2 E3")
        assert isinstance(rapid, Motion) and rapid.kind is MotionKind.RAPID
        assert isinstance(linear, Motion) and linear.kind is MotionKind.LINEAR
        assert rapid.axes.x == 1.0 and rapid.axes.y is None
        assert linear.axes.y == 2.0 and linear.axes.e == 3.0

    def test_mode_variants(self):
        assert self._decode("G90") == SetMode(CoordinateMode.ABSOLUTE)
        assert self._decode("g91") == SetMode(CoordinateMode.RELATIVE)

    def test_home_and_set_position(self):
        assert isinstance(self._decode("G28"), Home)
        set_pos = self._decode("G92 E0")
        assert isinstance(set_pos, SetPosition)
        assert set_pos.axes.e == 0.0
        assert set_pos.axes.x is None

    @pytest.mark.parametrize("text", ["M104 S210", "G2 X1 Y1 I1", "G4 P100", "T0", "G01 X1"])
    def test_unsupported(self, text):
        assert isinstance(self._decode(text), Unsupported)

    def test_unparseable_axes_listed(self):
        cmd = self._decode("G1 Xfoo Y1 E")
        assert cmd.axes.x is None
        assert cmd.axes.e is None
        assert cmd.axes.unparseable == ("x", "e")
