from gcodeview.analysis.bounds import Bounds, calculate_bounds
from gcodeview.analysis.statistics import Statistics, get_statistics
from gcodeview.analysis.layers import (
    default_layer_range,
    filter_by_z,
    layer_heights,
    z_fraction,
)

__all__ = [
    "Bounds",
    "calculate_bounds",
    "Statistics",
    "get_statistics",
    "default_layer_range",
    "filter_by_z",
    "layer_heights",
    "z_fraction",
]
