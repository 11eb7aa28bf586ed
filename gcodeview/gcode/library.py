"""Sample toolpath programs.

Ready-to-use G-code strings for demos, benchmarks and tests, so callers
can exercise the interpreter without shipping ``.gcode`` files.
"""

from __future__ import annotations

import math


# Filament cross-section for 1.75 mm filament
_FILAMENT_RADIUS = 1.75 / 2.0
_FILAMENT_AREA = math.pi * _FILAMENT_RADIUS ** 2  # ~2.405 mm^2


def _extrusion_length(
    segment_length: float,
    layer_height: float,
    extrusion_width: float = 0.4,
) -> float:
    """Filament length (mm) that deposits a bead of the given size.

    Volumetric equivalence: ``segment_length * layer_height * width`` of
    plastic divided by the filament cross-section.
    """
    volume = segment_length * layer_height * extrusion_width
    return volume / _FILAMENT_AREA


def _preamble(title: str) -> list[str]:
    return [
        f"; {title}",
        "M104 S210 ; set hotend temp",
        "M140 S60 ; set bed temp",
        "G28 ; home all axes",
        "G90 ; absolute positioning",
        "M106 S255 ; fan on full",
        "",
    ]


def _postamble() -> list[str]:
    return [
        "; End",
        "M104 S0 ; hotend off",
        "M140 S0 ; bed off",
        "M107 ; fan off",
        "G28 X Y ; home X Y",
        "M84 ; disable steppers",
    ]


def calibration_cube_gcode(
    size_mm: float = 20.0,
    layer_height: float = 0.2,
    num_layers: int = 10,
    retract_mm: float = 0.8,
    origin: tuple[float, float] = (100.0, 100.0),
) -> str:
    """Hollow cube, perimeter only, in absolute mode.

    Each layer resets the extruder with ``G92 E0``, travels to the corner
    with ``G0``, prints four edges and retracts before the next layer, so
    the program yields ``4 * num_layers`` extrusion moves.

    Parameters
    ----------
    size_mm:
        Side length of the cube in mm.
    layer_height:
        Layer height in mm.
    num_layers:
        Number of layers to print.
    retract_mm:
        Retraction length at the end of every layer; 0 disables it.
    origin:
        XY of the first corner.
    """
    ox, oy = origin
    corners = [
        (ox + size_mm, oy),
        (ox + size_mm, oy + size_mm),
        (ox, oy + size_mm),
        (ox, oy),
    ]

    lines = _preamble("Calibration cube")
    for layer in range(num_layers):
        z = (layer + 1) * layer_height
        lines.append(f"; Layer {layer}")
        lines.append("G92 E0 ; reset extruder")
        lines.append(f"G1 Z{z:.3f} F300")
        lines.append(f"G0 X{ox:.3f} Y{oy:.3f} F7200")

        e_total = 0.0
        for cx, cy in corners:
            e_total += _extrusion_length(size_mm, layer_height)
            lines.append(f"G1 X{cx:.3f} Y{cy:.3f} E{e_total:.5f} F3600")

        if retract_mm > 0.0:
            lines.append(f"G1 E{e_total - retract_mm:.5f} F2100 ; retract")
        lines.append("")

    lines.extend(_postamble())
    return "\n".join(lines) + "\n"


def single_line_gcode(
    length_mm: float = 100.0,
    layer_height: float = 0.2,
    start: tuple[float, float] = (50.0, 100.0),
) -> str:
    """A single straight extrusion along X: one travel, one Z move, one extrusion."""
    start_x, start_y = start
    e_length = _extrusion_length(length_mm, layer_height)

    lines = _preamble("Single line test")
    lines += [
        f"G1 Z{layer_height:.3f} F300",
        f"G0 X{start_x:.3f} Y{start_y:.3f} F7200",
        f"G1 X{start_x + length_mm:.3f} Y{start_y:.3f} E{e_length:.5f} F1800",
        "",
    ]
    lines.extend(_postamble())
    return "\n".join(lines) + "\n"


def relative_square_gcode(
    side_mm: float = 10.0,
    layer_height: float = 0.2,
    num_layers: int = 3,
) -> str:
    """A stacked square driven entirely by ``G91`` relative deltas."""
    e_step = _extrusion_length(side_mm, layer_height)
    deltas = [(side_mm, 0.0), (0.0, side_mm), (-side_mm, 0.0), (0.0, -side_mm)]

    lines = _preamble("Relative square")
    lines.append("G0 X50 Y50 Z0")
    lines.append("G91 ; relative positioning")
    for layer in range(num_layers):
        lines.append(f"; Layer {layer}")
        lines.append(f"G1 Z{layer_height:.3f} F300")
        for dx, dy in deltas:
            lines.append(f"G1 X{dx:.3f} Y{dy:.3f} E{e_step:.5f} F1800")
    lines.append("G90")
    lines.append("")
    lines.extend(_postamble())
    return "\n".join(lines) + "\n"


def spiral_vase_gcode(
    diameter: float = 40.0,
    height: float = 10.0,
    layer_height: float = 0.2,
    segments_per_rev: int = 64,
) -> str:
    """Single-wall cylinder with Z rising on every segment ("vase mode").

    Every extrusion segment changes height, which makes this program useful
    for checking how layer counting treats continuous Z.
    """
    radius = diameter / 2.0
    total_segments = int(height / layer_height * segments_per_rev)
    cx, cy = 100.0, 100.0
    seg_angle = 2.0 * math.pi / segments_per_rev
    z_per_segment = height / total_segments

    lines = _preamble("Spiral vase")
    start_x, start_y = cx + radius, cy
    lines.append(f"G0 X{start_x:.3f} Y{start_y:.3f} F7200")
    lines.append(f"G1 Z{layer_height:.3f} F300")

    e_total = 0.0
    prev_x, prev_y = start_x, start_y
    for seg in range(1, total_segments + 1):
        angle = seg * seg_angle
        x = cx + radius * math.cos(angle)
        y = cy + radius * math.sin(angle)
        z = layer_height + seg * z_per_segment
        e_total += _extrusion_length(math.hypot(x - prev_x, y - prev_y), layer_height)
        lines.append(f"G1 X{x:.3f} Y{y:.3f} Z{z:.3f} E{e_total:.5f} F2400")
        prev_x, prev_y = x, y

    lines.append("")
    lines.extend(_postamble())
    return "\n".join(lines) + "\n"
