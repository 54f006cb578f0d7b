"""
Layout Options
==============

Immutable presentation settings shared by every layout step, plus the
depth-based color schemes.

Design:
- One LayoutOptions value is passed unchanged into each pure layout function
- Color scheme is a plain callable (Score -> "#rrggbb"), pluggable
"""

from dataclasses import dataclass
from typing import Callable, Sequence

import supervision as sv

from scoretrace.errors import InvalidConfigurationError
from scoretrace.score import Score


ColorScheme = Callable[[Score], str]

DEFAULT_PALETTE = ("#ff0000", "#00ff00", "#0000ff")


def validate_color(color: str) -> str:
    """
    Check that color is a hex string the drawing surface can parse.

    Raises:
        InvalidConfigurationError: If color is not '#rgb' or '#rrggbb'
    """
    if not (isinstance(color, str) and color.startswith("#")):
        raise InvalidConfigurationError(
            f"Invalid palette color: {color!r}. Expected '#rgb' or '#rrggbb'"
        )
    try:
        sv.Color.from_hex(color)
    except ValueError as e:
        raise InvalidConfigurationError(
            f"Invalid palette color: {color!r}. Expected '#rgb' or '#rrggbb'"
        ) from e
    return color


def cyclic_color_scheme(palette: Sequence[str]) -> ColorScheme:
    """
    Build a scheme that cycles through palette by score depth.

    Args:
        palette: Non-empty sequence of "#rgb" or "#rrggbb" colors

    Returns:
        Callable mapping a score to palette[depth % len(palette)]

    Raises:
        InvalidConfigurationError: If palette is empty or holds an unparsable color
    """
    colors = tuple(palette)
    if not colors:
        raise InvalidConfigurationError("palette must contain at least one color")
    for color in colors:
        validate_color(color)

    def scheme(score: Score) -> str:
        return colors[score.depth % len(colors)]

    return scheme


depth_color_scheme = cyclic_color_scheme(DEFAULT_PALETTE)


@dataclass(frozen=True)
class LayoutOptions:
    """
    Presentation settings for a timeline.

    Attributes:
        origin_top: Y offset where both axes anchor (pixels)
        origin_left: X offset where both axes anchor, the left margin (pixels)
        line_height: Height of one depth row (pixels)
        font_size: Text height (pixels)
        color_scheme: Score -> fill color
        time_unit: Suffix appended to durations and tick values
    """

    origin_top: int = 50
    origin_left: int = 30
    line_height: int = 30
    font_size: int = 20
    color_scheme: ColorScheme = depth_color_scheme
    time_unit: str = "ms"

    def __post_init__(self):
        """Validate options."""
        if self.origin_left <= 0:
            raise InvalidConfigurationError(
                f"origin_left must be > 0, got {self.origin_left}"
            )
        if self.origin_top < 0:
            raise InvalidConfigurationError(
                f"origin_top must be >= 0, got {self.origin_top}"
            )
        if self.line_height <= 0:
            raise InvalidConfigurationError(
                f"line_height must be > 0, got {self.line_height}"
            )
        if self.font_size <= 0:
            raise InvalidConfigurationError(
                f"font_size must be > 0, got {self.font_size}"
            )
