"""
Geometry Layer
==============

Bounded Context: Pixel-space output of the timeline layout.

Responsibilities:
- Shape representation (immutable)
- NO scaling, NO drawing

Design Philosophy:
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from scoretrace.geometry.shapes import (
    Point,
    Line,
    Label,
    Tick,
    Rectangle,
    DepthAxis,
    TimeAxis,
)

__all__ = [
    "Point",
    "Line",
    "Label",
    "Tick",
    "Rectangle",
    "DepthAxis",
    "TimeAxis",
]
