"""
Rendering Layer
===============

Bounded Context: Timeline drawing and persistence.

Responsibilities:
- Draw axes, ticks and score rectangles on a surface
- Serialize the surface to an embeddable image
- Persist the artifact through a sink

Non-responsibilities:
- Scaling (handled by layout.scale)
- Positioning (handled by layout.axis / layout.events)

Design:
- Stateless drawing
- Uses supervision.draw.utils
- Surface and sink are swappable abstractions
"""

from scoretrace.rendering.surface import DrawingSurface, CanvasSurface
from scoretrace.rendering.sink import ArtifactSink, FileSink, to_html_fragment
from scoretrace.rendering.renderer import TimelineRenderer

__all__ = [
    "DrawingSurface",
    "CanvasSurface",
    "ArtifactSink",
    "FileSink",
    "to_html_fragment",
    "TimelineRenderer",
]
