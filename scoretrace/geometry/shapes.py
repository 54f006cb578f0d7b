"""
Geometric Shapes Module
========================

Pure geometric output of the layout layer - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Absolute pixel coordinates (origin is top-left corner of the canvas)
- Consumed only by the renderer, never mutated after creation
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """Pixel coordinate."""

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True)
class Line:
    """
    Straight segment between two points.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Point
    end: Point


@dataclass(frozen=True)
class Label:
    """
    Text anchored at the left end of its baseline.

    Attributes:
        text: Text to draw
        anchor: Baseline-left position
        font_size: Glyph height in pixels
    """

    text: str
    anchor: Point
    font_size: float


@dataclass(frozen=True)
class Tick:
    """
    Time axis tick: short vertical mark plus its label.

    Attributes:
        value: Elapsed time at this tick (ms since epoch of the timeline)
        mark: Vertical stroke
        label: Formatted value
    """

    value: float
    mark: Line
    label: Label


@dataclass(frozen=True)
class Rectangle:
    """
    One laid-out score.

    Attributes:
        left: Left edge x-coordinate (pixels)
        top: Top edge y-coordinate (pixels)
        width: Width (pixels, 0 for zero-duration scores)
        height: Row height (pixels)
        color: Fill color as "#rrggbb"
        label: Name and duration text

    Invariants:
        - width >= 0
        - height > 0
    """

    left: float
    top: float
    width: float
    height: float
    color: str
    label: Label

    def __post_init__(self):
        """Validate invariants."""
        if self.width < 0:
            raise ValueError(f"Rectangle width must be >= 0, got {self.width}")
        if self.height <= 0:
            raise ValueError(f"Rectangle height must be > 0, got {self.height}")

    @property
    def right(self) -> float:
        return self.left + self.width


@dataclass(frozen=True)
class DepthAxis:
    """Vertical axis with one label per depth row."""

    line: Line
    labels: Tuple[Label, ...]


@dataclass(frozen=True)
class TimeAxis:
    """Horizontal axis with evenly spaced ticks."""

    line: Line
    ticks: Tuple[Tick, ...]
