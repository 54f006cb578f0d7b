"""
Event Layout Module
===================

Maps each score to one rectangle with a label and a fill color.

Design:
- Input order is preserved (draw order == input order)
- Overlapping scores on the same row are not resolved
- Zero-duration scores become zero-width rectangles, never dropped
"""

from typing import Sequence, Tuple

from scoretrace.geometry.shapes import Label, Point, Rectangle
from scoretrace.layout.options import LayoutOptions
from scoretrace.layout.scale import ScaleModel
from scoretrace.score import Score


def format_duration(duration: float) -> str:
    """Render a duration without a trailing ".0" for integral values."""
    if float(duration).is_integer():
        return str(int(duration))
    return str(duration)


def layout_event(score: Score, scale: ScaleModel, options: LayoutOptions) -> Rectangle:
    """
    Place a single score.

    Args:
        score: Score to place
        scale: Shared scale of the whole timeline
        options: Shared layout options

    Returns:
        Rectangle in absolute pixel coordinates
    """
    left = scale.offset_of(score) * scale.ratio + options.origin_left
    top = score.depth * options.line_height + options.origin_top

    label = Label(
        text=f"{score.name} {format_duration(score.duration)}{options.time_unit}",
        anchor=Point(x=left, y=top + options.line_height / 2),
        font_size=options.font_size,
    )

    return Rectangle(
        left=left,
        top=top,
        width=score.duration * scale.ratio,
        height=options.line_height,
        color=options.color_scheme(score),
        label=label,
    )


def layout_events(
    scores: Sequence[Score],
    scale: ScaleModel,
    options: LayoutOptions,
) -> Tuple[Rectangle, ...]:
    """Place every score, in input order."""
    return tuple(layout_event(score, scale, options) for score in scores)
