"""
Timeline Assembly Module
========================

Runs scale computation once and feeds the same ScaleModel to both axis
layouts and the event layout.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from scoretrace.errors import InvalidConfigurationError
from scoretrace.geometry.shapes import DepthAxis, Rectangle, TimeAxis
from scoretrace.layout.axis import layout_depth_axis, layout_time_axis
from scoretrace.layout.events import layout_events
from scoretrace.layout.options import LayoutOptions
from scoretrace.layout.scale import ScaleModel, compute_scale
from scoretrace.score import Score


@dataclass(frozen=True)
class TimelineGeometry:
    """
    Everything the renderer needs to draw one timeline.

    Attributes:
        canvas_width: Canvas width (pixels)
        canvas_height: Canvas height (pixels)
        scale: Shared scale used by every element below
        depth_axis: Vertical axis geometry
        time_axis: Horizontal axis geometry
        rectangles: One rectangle per score, input order
    """

    canvas_width: int
    canvas_height: int
    scale: ScaleModel
    depth_axis: DepthAxis
    time_axis: TimeAxis
    rectangles: Tuple[Rectangle, ...]


def validate_canvas(canvas_width: int, canvas_height: int, options: LayoutOptions) -> None:
    """
    Check canvas dimensions against the layout options.

    Raises:
        InvalidConfigurationError: If a dimension is not positive or the left
            margin does not fit inside the canvas
    """
    if canvas_width <= 0 or canvas_height <= 0:
        raise InvalidConfigurationError(
            f"canvas dimensions must be positive, got {canvas_width}x{canvas_height}"
        )
    if options.origin_left >= canvas_width:
        raise InvalidConfigurationError(
            f"origin_left ({options.origin_left}) must be smaller than "
            f"canvas_width ({canvas_width})"
        )


def build_timeline(
    scores: Sequence[Score],
    canvas_width: int,
    canvas_height: int,
    options: LayoutOptions | None = None,
) -> TimelineGeometry:
    """
    Lay out a full timeline.

    Args:
        scores: Scores to draw
        canvas_width: Canvas width (pixels)
        canvas_height: Canvas height (pixels)
        options: Layout options (defaults to LayoutOptions())

    Returns:
        Immutable TimelineGeometry

    Raises:
        InvalidConfigurationError: If canvas or options are out of range
        MalformedInputError: If a score start cannot be resolved
    """
    options = options or LayoutOptions()
    validate_canvas(canvas_width, canvas_height, options)

    scores = tuple(scores)
    scale = compute_scale(scores, canvas_width, options.origin_left)

    return TimelineGeometry(
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        scale=scale,
        depth_axis=layout_depth_axis(scale, options),
        time_axis=layout_time_axis(scale, options),
        rectangles=layout_events(scores, scale, options),
    )
