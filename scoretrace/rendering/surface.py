"""
Drawing Surface Module
======================

Drawing capability consumed by the renderer.

Design:
- DrawingSurface (abstract): line, filled rectangle, text, serialization
- CanvasSurface (concrete): white BGR numpy canvas drawn with supervision
  draw utilities, serialized to a PNG data URL with OpenCV
- One surface per render call, never shared

Dependencies:
- supervision (draw utilities, Color, Point, Rect)
- numpy (canvas buffer)
- cv2 (font metrics, PNG encoding)
"""

import base64
from abc import ABC, abstractmethod

import cv2
import numpy as np
import supervision as sv
import supervision.draw.utils as sv_draw

from scoretrace.geometry.shapes import Point


class DrawingSurface(ABC):
    """
    Abstract drawing target.

    Coordinates are absolute pixels, colors are "#rrggbb" strings.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    @abstractmethod
    def line(self, start: Point, end: Point, color: str, thickness: int = 1) -> None:
        """Stroke a straight line."""

    @abstractmethod
    def filled_rectangle(
        self, left: float, top: float, width: float, height: float, color: str
    ) -> None:
        """Fill an axis-aligned rectangle."""

    @abstractmethod
    def text(self, text: str, anchor: Point, font_size: float, color: str) -> None:
        """Draw text with its baseline starting at anchor."""

    @abstractmethod
    def to_data_url(self) -> str:
        """Serialize the accumulated drawing to an embeddable data URL."""


class CanvasSurface(DrawingSurface):
    """
    In-memory raster surface.

    Usage:
        surface = CanvasSurface(width=800, height=400)
        surface.line(Point(0, 0), Point(100, 0), color="#000000")
        url = surface.to_data_url()
    """

    def __init__(
        self,
        width: int,
        height: int,
        background_color: str = "#ffffff",
        text_thickness: int = 1,
        text_font: int = cv2.FONT_HERSHEY_SIMPLEX,
    ):
        """
        Initialize a blank canvas.

        Args:
            width: Canvas width (pixels)
            height: Canvas height (pixels)
            background_color: Fill color of the blank canvas
            text_thickness: Stroke thickness for text
            text_font: OpenCV font face
        """
        super().__init__(width, height)
        self.text_thickness = text_thickness
        self.text_font = text_font

        self.canvas = np.zeros((height, width, 3), dtype=np.uint8)
        self.canvas[:] = sv.Color.from_hex(background_color).as_bgr()

    def line(self, start: Point, end: Point, color: str, thickness: int = 1) -> None:
        self.canvas = sv.draw_line(
            scene=self.canvas,
            start=sv.Point(x=start.x, y=start.y),
            end=sv.Point(x=end.x, y=end.y),
            color=sv.Color.from_hex(color),
            thickness=thickness,
        )

    def filled_rectangle(
        self, left: float, top: float, width: float, height: float, color: str
    ) -> None:
        # Zero-width rectangles still rasterize as a one pixel column
        self.canvas = sv_draw.draw_filled_rectangle(
            scene=self.canvas,
            rect=sv.Rect(x=left, y=top, width=width, height=height),
            color=sv.Color.from_hex(color),
        )

    def text(self, text: str, anchor: Point, font_size: float, color: str) -> None:
        if not text:
            return

        text_scale = cv2.getFontScaleFromHeight(
            self.text_font, int(round(font_size)), self.text_thickness
        )
        (text_width, text_height), _ = cv2.getTextSize(
            text, self.text_font, text_scale, self.text_thickness
        )

        # sv.draw_text centers the text on its anchor
        center = sv.Point(
            x=int(round(anchor.x + text_width / 2)),
            y=int(round(anchor.y - text_height / 2)),
        )
        self.canvas = sv.draw_text(
            scene=self.canvas,
            text=text,
            text_anchor=center,
            text_color=sv.Color.from_hex(color),
            text_scale=text_scale,
            text_thickness=self.text_thickness,
            text_padding=0,
            text_font=self.text_font,
        )

    def to_png(self) -> bytes:
        """
        Encode the canvas as PNG.

        Raises:
            RuntimeError: If OpenCV fails to encode the canvas
        """
        ok, buffer = cv2.imencode(".png", self.canvas)
        if not ok:
            raise RuntimeError("Failed to encode canvas as PNG")
        return buffer.tobytes()

    def to_data_url(self) -> str:
        encoded = base64.b64encode(self.to_png()).decode("ascii")
        return f"data:image/png;base64,{encoded}"
