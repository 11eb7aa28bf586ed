from gcodeview.render.preview import (
    ToolpathPreview,
    frame_view,
    plot_toolpath,
    segment_array,
    segment_colors,
)

__all__ = ["ToolpathPreview", "frame_view", "plot_toolpath", "segment_array", "segment_colors"]
