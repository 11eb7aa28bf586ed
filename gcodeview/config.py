"""ViewerConfig — tunables for interpretation, statistics and preview."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ViewerConfig:
    """Settings shared by the interpreter, the analysis helpers and the preview."""

    # --- Line normalizer ---
    comment_marker: str = ";"  # everything from here to end-of-line is dropped

    # --- Statistics ---
    display_decimals: int = 2  # rounding for displayed distances

    # --- Playback ---
    playback_speed: float = 1.0  # frames per tick (floored, min 1)

    # --- Preview colours ---
    layer_hue_span: float = 0.7  # HSV hue range from lowest to highest layer
    travel_color: str = "#00ff00"
    travel_alpha: float = 0.2
    hidden_alpha: float = 0.1  # segments past the playback frame

    # --- Preview framing ---
    plate_margin: float = 20.0  # mm padding around the bounds
    camera_distance_factor: float = 1.5

    def __post_init__(self) -> None:
        if not self.comment_marker:
            raise ValueError("comment_marker must be a non-empty string")
        if self.display_decimals < 0:
            raise ValueError(f"display_decimals must be >= 0, got {self.display_decimals}")


# Singleton default config
DEFAULT_CONFIG = ViewerConfig()
