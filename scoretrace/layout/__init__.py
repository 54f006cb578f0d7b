"""
Layout Layer
============

Bounded Context: Converting timing data into pixel geometry.

Responsibilities:
- Scale model (epoch, ratio, max duration, max depth)
- Axis layout (depth rows, time ticks)
- Event layout (one rectangle per score)
- NO drawing, NO I/O

Design Philosophy:
- Pure functions, immutable inputs and outputs
- One ScaleModel per timeline, shared by every step
- Fail-fast validation
"""

from scoretrace.layout.options import (
    LayoutOptions,
    ColorScheme,
    DEFAULT_PALETTE,
    cyclic_color_scheme,
    depth_color_scheme,
)
from scoretrace.layout.scale import ScaleModel, compute_scale
from scoretrace.layout.axis import TICK_COUNT, layout_depth_axis, layout_time_axis
from scoretrace.layout.events import layout_event, layout_events
from scoretrace.layout.timeline import TimelineGeometry, build_timeline, validate_canvas

__all__ = [
    # Options
    "LayoutOptions",
    "ColorScheme",
    "DEFAULT_PALETTE",
    "cyclic_color_scheme",
    "depth_color_scheme",
    # Scale
    "ScaleModel",
    "compute_scale",
    # Axes
    "TICK_COUNT",
    "layout_depth_axis",
    "layout_time_axis",
    # Events
    "layout_event",
    "layout_events",
    # Assembly
    "TimelineGeometry",
    "build_timeline",
    "validate_canvas",
]
