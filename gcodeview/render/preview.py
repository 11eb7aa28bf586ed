"""Matplotlib 3-D preview of an interpreted toolpath.

Extrusion segments are coloured by height, segments beyond the playback
frame are faded, and travel moves can be overlaid.  Matplotlib's 3-D axes
are z-up like the machine, so coordinates are drawn unchanged.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from matplotlib.colors import hsv_to_rgb, to_rgba

from gcodeview.analysis.bounds import Bounds, calculate_bounds
from gcodeview.analysis.layers import filter_by_z, z_fraction
from gcodeview.config import DEFAULT_CONFIG, ViewerConfig
from gcodeview.gcode.interpreter import Move, ParseResult


def segment_array(moves: Sequence[Move]) -> np.ndarray:
    """``(N, 2, 3)`` array of start/end xyz, as expected by ``Line3DCollection``."""
    if not moves:
        return np.zeros((0, 2, 3))
    return np.array(
        [
            ((m.start.x, m.start.y, m.start.z), (m.end.x, m.end.y, m.end.z))
            for m in moves
        ],
        dtype=float,
    )


def segment_colors(
    paths: Sequence[Move],
    bounds: Bounds,
    frame: int | None = None,
    config: ViewerConfig = DEFAULT_CONFIG,
) -> np.ndarray:
    """RGBA colour per path segment.

    Hue runs from red at the lowest layer up to ``layer_hue_span`` at the
    highest.  With a *frame*, segments whose index exceeds it use
    ``hidden_alpha``.
    """
    if not paths:
        return np.zeros((0, 4))
    hues = np.array([z_fraction(m, bounds) * config.layer_hue_span for m in paths])
    hsv = np.stack([hues, np.ones_like(hues), np.ones_like(hues)], axis=1)
    rgba = np.ones((len(paths), 4))
    rgba[:, :3] = hsv_to_rgb(hsv)
    if frame is not None:
        rgba[frame + 1:, 3] = config.hidden_alpha
    return rgba


def _setup_axis(ax) -> None:
    ax.set_title("Toolpath", fontsize=10)
    ax.set_xlabel("X (mm)", fontsize=8)
    ax.set_ylabel("Y (mm)", fontsize=8)
    ax.set_zlabel("Z (mm)", fontsize=8)


def _draw_plate(ax, bounds: Bounds, config: ViewerConfig) -> None:
    margin = config.plate_margin / 2.0
    x0, x1 = bounds.min[0] - margin, bounds.max[0] + margin
    y0, y1 = bounds.min[1] - margin, bounds.max[1] + margin
    xx, yy = np.meshgrid([x0, x1], [y0, y1])
    zz = np.full_like(xx, bounds.min[2] - 0.1)
    ax.plot_surface(xx, yy, zz, color="#333333", alpha=0.3)


def frame_view(ax, bounds: Bounds, config: ViewerConfig = DEFAULT_CONFIG) -> None:
    """Centre *ax* on *bounds* with a cube of side ``largest extent * factor``."""
    half = max(bounds.largest_extent, 1.0) * config.camera_distance_factor / 2.0
    cx, cy, cz = bounds.center
    ax.set_xlim(cx - half, cx + half)
    ax.set_ylim(cy - half, cy + half)
    ax.set_zlim(max(bounds.min[2], cz - half), cz + half)


def plot_toolpath(
    result: ParseResult,
    ax=None,
    frame: int | None = None,
    show_travel: bool = False,
    z_range: tuple[float, float] | None = None,
    config: ViewerConfig = DEFAULT_CONFIG,
):
    """Draw *result* on a 3-D axis and return the axis.

    Parameters
    ----------
    result:
        Output of ``parse_gcode``.
    ax:
        Target 3-D axis; a new figure is created when ``None``.
    frame:
        Playback frame; later segments are faded.  ``None`` shows all.
    show_travel:
        Overlay non-extrusion moves.
    z_range:
        Inclusive layer filter on segment start height.
    """
    from mpl_toolkits.mplot3d.art3d import Line3DCollection

    if ax is None:
        import matplotlib.pyplot as plt

        ax = plt.figure().add_subplot(projection="3d")
    _setup_axis(ax)

    bounds = calculate_bounds(result.paths)
    _draw_plate(ax, bounds, config)

    indexed = list(enumerate(result.paths))
    if z_range is not None:
        keep = {id(m) for m in filter_by_z(result.paths, *z_range)}
        indexed = [(i, m) for i, m in indexed if id(m) in keep]

    colors = segment_colors(result.paths, bounds, frame, config)
    if indexed:
        shown = [m for _, m in indexed]
        ax.add_collection3d(
            Line3DCollection(
                segment_array(shown),
                colors=colors[[i for i, _ in indexed]],
                linewidths=1.5,
            )
        )

    if show_travel:
        travel = [m for m in result.moves if not m.is_extrusion]
        if z_range is not None:
            travel = filter_by_z(travel, *z_range)
        if travel:
            ax.add_collection3d(
                Line3DCollection(
                    segment_array(travel),
                    colors=[to_rgba(config.travel_color, config.travel_alpha)],
                    linewidths=0.8,
                )
            )

    frame_view(ax, bounds, config)
    return ax


class ToolpathPreview:
    """Single-axis 3-D figure showing one ``ParseResult``."""

    def __init__(
        self,
        figsize: tuple[float, float] = (9, 8),
        config: ViewerConfig = DEFAULT_CONFIG,
    ) -> None:
        import matplotlib.pyplot as plt

        self._plt = plt
        self.config = config
        self._fig = plt.figure(figsize=figsize)
        self._ax = self._fig.add_subplot(projection="3d")
        _setup_axis(self._ax)

    # ------------------------------------------------------------------
    #  Public API
    # ------------------------------------------------------------------

    @property
    def axes(self):
        return self._ax

    def draw(
        self,
        result: ParseResult,
        frame: int | None = None,
        show_travel: bool = False,
        z_range: tuple[float, float] | None = None,
    ) -> None:
        """Redraw the figure for *result*; see :func:`plot_toolpath`."""
        self._ax.cla()
        plot_toolpath(result, self._ax, frame, show_travel, z_range, self.config)
        self._fig.canvas.draw_idle()

    def show(self) -> None:
        self._plt.show()

    def close(self) -> None:
        """Close the matplotlib figure."""
        self._plt.close(self._fig)

    def get_rgb_array(self) -> np.ndarray:
        """Return the current figure as an RGB numpy array (H, W, 3)."""
        self._fig.canvas.draw()
        arr = np.asarray(self._fig.canvas.buffer_rgba())
        return arr[:, :, :3].copy()
