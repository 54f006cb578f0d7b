"""
Axis Layout Module
==================

Depth (vertical) and time (horizontal) axes, both anchored at the origin.

Tick positions use the same ratio as event placement, so the last tick
always coincides with the right end of the time axis and with the right
edge of the longest score.
"""

from scoretrace.geometry.shapes import DepthAxis, Label, Line, Point, Tick, TimeAxis
from scoretrace.layout.options import LayoutOptions
from scoretrace.layout.scale import ScaleModel


TICK_COUNT = 10
TICK_LENGTH = 10
LABEL_OFFSET = 20


def layout_depth_axis(scale: ScaleModel, options: LayoutOptions) -> DepthAxis:
    """
    Vertical line spanning every depth row, one label per row.

    Labels sit left of the line, vertically centered in their row.
    """
    origin = Point(x=options.origin_left, y=options.origin_top)
    rows = scale.max_depth + 1

    line = Line(
        start=origin,
        end=Point(x=origin.x, y=origin.y + rows * options.line_height),
    )

    labels = tuple(
        Label(
            text=str(depth),
            anchor=Point(
                x=origin.x - LABEL_OFFSET,
                y=origin.y + (depth + 0.5) * options.line_height + options.font_size / 2,
            ),
            font_size=options.font_size,
        )
        for depth in range(rows)
    )

    return DepthAxis(line=line, labels=labels)


def layout_time_axis(scale: ScaleModel, options: LayoutOptions) -> TimeAxis:
    """
    Horizontal line spanning max_duration * ratio with TICK_COUNT ticks.

    Tick i (1..TICK_COUNT) marks (max_duration / TICK_COUNT) * i. For a
    degenerate scale every tick collapses onto the origin.
    """
    origin = Point(x=options.origin_left, y=options.origin_top)
    step = scale.max_duration / TICK_COUNT

    line = Line(
        start=origin,
        end=Point(x=origin.x + scale.max_duration * scale.ratio, y=origin.y),
    )

    ticks = []
    for i in range(1, TICK_COUNT + 1):
        # last tick pinned to max_duration so it lands on the axis end exactly
        value = scale.max_duration if i == TICK_COUNT else step * i
        x = origin.x + value * scale.ratio
        ticks.append(
            Tick(
                value=value,
                mark=Line(
                    start=Point(x=x, y=origin.y),
                    end=Point(x=x, y=origin.y - TICK_LENGTH),
                ),
                label=Label(
                    text=f"{value:.2f}{options.time_unit}",
                    anchor=Point(x=x - LABEL_OFFSET, y=origin.y - LABEL_OFFSET),
                    font_size=options.font_size,
                ),
            )
        )

    return TimeAxis(line=line, ticks=tuple(ticks))
