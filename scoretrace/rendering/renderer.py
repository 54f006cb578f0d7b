"""
Timeline Renderer Module
========================

Pure drawing layer for laid-out timelines.

Design:
- SRP: only draws, never computes positions
- Works on any DrawingSurface
- Draw order: depth axis, time axis, rectangles (input order)
"""

from scoretrace.geometry.shapes import DepthAxis, Rectangle, TimeAxis
from scoretrace.layout.timeline import TimelineGeometry
from scoretrace.rendering.surface import DrawingSurface


class TimelineRenderer:
    """
    Stateless renderer for timeline geometry.

    Usage:
        renderer = TimelineRenderer(axis_color="#000000", text_color="#000000")
        renderer.draw(surface, geometry)
    """

    def __init__(
        self,
        axis_color: str = "#000000",
        text_color: str = "#000000",
        axis_thickness: int = 1,
    ):
        """
        Initialize renderer with style configuration.

        Args:
            axis_color: Stroke color for axes and ticks
            text_color: Color for every label
            axis_thickness: Stroke width for axes and ticks
        """
        self.axis_color = axis_color
        self.text_color = text_color
        self.axis_thickness = axis_thickness

    def draw(self, surface: DrawingSurface, geometry: TimelineGeometry) -> DrawingSurface:
        """Draw every element of the timeline, returns the same surface."""
        self.draw_depth_axis(surface, geometry.depth_axis)
        self.draw_time_axis(surface, geometry.time_axis)
        self.draw_rectangles(surface, geometry.rectangles)
        return surface

    def draw_depth_axis(self, surface: DrawingSurface, axis: DepthAxis) -> None:
        surface.line(axis.line.start, axis.line.end, self.axis_color, self.axis_thickness)
        for label in axis.labels:
            surface.text(label.text, label.anchor, label.font_size, self.text_color)

    def draw_time_axis(self, surface: DrawingSurface, axis: TimeAxis) -> None:
        surface.line(axis.line.start, axis.line.end, self.axis_color, self.axis_thickness)
        for tick in axis.ticks:
            surface.line(tick.mark.start, tick.mark.end, self.axis_color, self.axis_thickness)
            surface.text(tick.label.text, tick.label.anchor, tick.label.font_size, self.text_color)

    def draw_rectangles(self, surface: DrawingSurface, rectangles: tuple[Rectangle, ...]) -> None:
        # Later rectangles occlude earlier ones on the same row
        for rectangle in rectangles:
            surface.filled_rectangle(
                rectangle.left,
                rectangle.top,
                rectangle.width,
                rectangle.height,
                rectangle.color,
            )
            surface.text(
                rectangle.label.text,
                rectangle.label.anchor,
                rectangle.label.font_size,
                self.text_color,
            )
