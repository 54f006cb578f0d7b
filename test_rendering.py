"""
Test Rendering and Pipeline
===========================

Covers the drawing surface, renderer draw order, sinks and the full
render_timeline flow (layout -> draw -> serialize -> persist).

Usage:
    pytest test_rendering.py
    python test_rendering.py
"""

import base64
import json
import logging
import tempfile
from pathlib import Path

import cv2
import numpy as np
import pytest

from scoretrace import (
    CanvasSurface,
    FileSink,
    InvalidConfigurationError,
    LayoutOptions,
    MalformedInputError,
    Score,
    SinkWriteError,
    TimelineBuilder,
    TimelineRenderer,
    build_timeline,
    render_timeline,
)
from scoretrace.geometry import Point
from scoretrace.logging import create_logger
from scoretrace.rendering import ArtifactSink, DrawingSurface, to_html_fragment


T = "2024-05-01T12:00:00Z"
T_PLUS_10 = "2024-05-01T12:00:00.010Z"

QUIET = create_logger("test", level=logging.CRITICAL)


def two_scores() -> list[Score]:
    return [
        Score(name="a", start=T, duration=100, depth=0),
        Score(name="b", start=T_PLUS_10, duration=50, depth=1),
    ]


class RecordingSurface(DrawingSurface):
    """Surface that records drawing calls instead of rasterizing."""

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self.calls = []

    def line(self, start, end, color, thickness=1):
        self.calls.append(("line", start.as_tuple(), end.as_tuple(), color))

    def filled_rectangle(self, left, top, width, height, color):
        self.calls.append(("rect", left, top, width, height, color))

    def text(self, text, anchor, font_size, color):
        self.calls.append(("text", text, anchor.as_tuple()))

    def to_data_url(self):
        return "data:,"


class MemorySink(ArtifactSink):
    """Sink keeping payloads in a dict."""

    def __init__(self):
        self.written = {}

    def write(self, destination, payload):
        self.written[destination] = payload


def decode_artifact(html: str) -> np.ndarray:
    prefix = '<img src="data:image/png;base64,'
    assert html.startswith(prefix)
    encoded = html[len(prefix):html.index('"', len(prefix))]
    buffer = np.frombuffer(base64.b64decode(encoded), dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_COLOR)
    assert image is not None
    return image


def test_canvas_surface_primitives():
    print("\n" + "=" * 60)
    print("TEST: CanvasSurface primitives")
    print("=" * 60)

    surface = CanvasSurface(width=200, height=100)
    assert surface.canvas.shape == (100, 200, 3)
    assert (surface.canvas == 255).all()
    print("✓ Blank canvas is white")

    surface.filled_rectangle(10, 20, 50, 30, "#ff0000")
    # BGR order
    assert tuple(surface.canvas[35, 30]) == (0, 0, 255)
    assert tuple(surface.canvas[5, 5]) == (255, 255, 255)
    print("✓ Filled rectangle drawn")

    surface.filled_rectangle(120, 20, 0, 30, "#0000ff")
    assert tuple(surface.canvas[35, 120]) == (255, 0, 0)
    print("✓ Zero-width rectangle collapses to a line")

    surface.line(Point(0, 90), Point(199, 90), "#000000", 1)
    assert tuple(surface.canvas[90, 100]) == (0, 0, 0)
    print("✓ Line drawn")

    before = surface.canvas.copy()
    surface.text("label", Point(150, 80), 12, "#000000")
    assert not np.array_equal(before, surface.canvas)
    surface.text("", Point(150, 80), 12, "#000000")
    print("✓ Text drawn")

    url = surface.to_data_url()
    assert url.startswith("data:image/png;base64,")
    image = cv2.imdecode(
        np.frombuffer(base64.b64decode(url.split(",", 1)[1]), dtype=np.uint8),
        cv2.IMREAD_COLOR,
    )
    assert image.shape == (100, 200, 3)
    print("✓ Serialized to PNG data URL")


def test_renderer_draw_order():
    """Depth axis, then time axis, then rectangles in input order."""
    geometry = build_timeline(two_scores(), canvas_width=500, canvas_height=200)
    surface = RecordingSurface(500, 200)

    TimelineRenderer().draw(surface, geometry)

    calls = surface.calls
    # depth axis line + 2 labels
    assert calls[0] == ("line", (30, 50), (30, 110), "#000000")
    assert [c[1] for c in calls[1:3]] == ["0", "1"]
    # time axis line, then 10 x (mark, label)
    assert calls[3][0] == "line"
    assert calls[3][1] == (30, 50)
    tick_calls = calls[4:24]
    assert [c[0] for c in tick_calls] == ["line", "text"] * 10
    assert tick_calls[-1][1] == "100.00ms"
    # rectangles
    rect_calls = calls[24:]
    assert [c[0] for c in rect_calls] == ["rect", "text", "rect", "text"]
    assert rect_calls[0][5] == "#ff0000"
    assert rect_calls[1][1] == "a 100ms"
    assert rect_calls[2][5] == "#00ff00"
    assert rect_calls[3][1] == "b 50ms"
    print("✓ Renderer draws axes before rectangles, input order kept")


def test_render_timeline_writes_html():
    print("\n" + "=" * 60)
    print("TEST: render_timeline end-to-end")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        destination = Path(tmp) / "timeline.html"
        result = render_timeline(
            two_scores(),
            canvas_width=500,
            canvas_height=200,
            output_destination=str(destination),
            logger=QUIET,
        )

        assert result is None
        html = destination.read_text()
        image = decode_artifact(html)
        assert image.shape == (200, 500, 3)
        # inside rectangle "a" (row 0, red fill) away from its label
        assert tuple(image[75, 400]) == (0, 0, 255)
        # inside rectangle "b" (row 1, green fill)
        assert tuple(image[105, 250]) == (0, 255, 0)

    print("✓ HTML fragment with embedded PNG written")


def test_render_overwrites_existing_artifact():
    with tempfile.TemporaryDirectory() as tmp:
        destination = Path(tmp) / "timeline.html"
        destination.write_text("stale")

        render_timeline(two_scores(), 500, 200, str(destination), logger=QUIET)

        assert not destination.read_text().startswith("stale")


def test_render_empty_scores_completes():
    sink = MemorySink()
    render_timeline([], 300, 100, "empty.html", sink=sink, logger=QUIET)

    image = decode_artifact(sink.written["empty.html"])
    assert image.shape == (100, 300, 3)
    print("✓ Empty score set renders a blank timeline")


def test_malformed_input_writes_nothing():
    scores = two_scores() + [Score(name="bad", start="yesterday", duration=1)]

    with tempfile.TemporaryDirectory() as tmp:
        destination = Path(tmp) / "timeline.html"
        with pytest.raises(MalformedInputError):
            render_timeline(scores, 500, 200, str(destination), logger=QUIET)
        assert not destination.exists()

    print("✓ Malformed input aborts before persisting")


def test_invalid_configuration_checked_first():
    sink = MemorySink()
    created = []

    def factory(width, height):
        created.append((width, height))
        return RecordingSurface(width, height)

    with pytest.raises(InvalidConfigurationError):
        render_timeline(
            two_scores(), 20, 200, "out.html",
            surface_factory=factory, sink=sink, logger=QUIET,
        )

    assert created == []
    assert sink.written == {}


def test_sink_write_error():
    with tempfile.TemporaryDirectory() as tmp:
        destination = Path(tmp) / "missing" / "timeline.html"
        with pytest.raises(SinkWriteError) as exc_info:
            render_timeline(two_scores(), 500, 200, str(destination), logger=QUIET)

        assert exc_info.value.destination == str(destination)
        assert isinstance(exc_info.value.__cause__, OSError)

    print("✓ Unwritable destination surfaces SinkWriteError")


class RecordCollector(logging.Handler):
    """Handler keeping the JSON records emitted by a StructuredLogger."""

    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(json.loads(record.getMessage()))


def test_draw_failure_logged_and_reraised():
    logger = create_logger("draw_failure", level=logging.ERROR)
    collector = RecordCollector()
    logger.logger.addHandler(collector)
    sink = MemorySink()

    options = LayoutOptions(color_scheme=lambda score: "#zzzzzz")

    try:
        with pytest.raises(ValueError):
            render_timeline(
                two_scores(), 500, 200, "out.html",
                options=options, sink=sink, logger=logger,
            )
    finally:
        logger.logger.removeHandler(collector)

    assert sink.written == {}
    assert [r["event"] for r in collector.records] == ["error.draw"]
    assert collector.records[0]["level"] == "ERROR"
    assert collector.records[0]["exception"]["type"] == "ValueError"
    print("✓ Drawing failure logged as error.draw and re-raised")


def test_default_output_in_runs_dir():
    with tempfile.TemporaryDirectory() as tmp:
        pipeline = (
            TimelineBuilder()
            .with_scores(two_scores())
            .with_canvas(500, 200)
            .with_runs_dir(tmp)
            .with_sink(MemorySink())
            .with_logger(QUIET)
            .build()
        )

        destination = Path(pipeline.config.output_destination)
        assert destination.name == "timeline.html"
        assert destination.parent.parent == Path(tmp) / "timeline"
        assert destination.parent.is_dir()


def test_file_sink_create_parents():
    with tempfile.TemporaryDirectory() as tmp:
        destination = Path(tmp) / "nested" / "dir" / "out.html"
        FileSink(create_parents=True).write(str(destination), "payload")
        assert destination.read_text() == "payload"


def test_builder_injection():
    sink = MemorySink()
    surfaces = []

    def factory(width, height):
        surface = RecordingSurface(width, height)
        surfaces.append(surface)
        return surface

    pipeline = (
        TimelineBuilder()
        .with_scores(two_scores())
        .with_canvas(500, 200)
        .with_output("trace.html")
        .with_surface_factory(factory)
        .with_sink(sink)
        .with_logger(QUIET)
        .build()
    )
    pipeline.render()

    assert len(surfaces) == 1
    assert sink.written == {"trace.html": to_html_fragment("data:,")}
    assert pipeline.layout() == pipeline.layout()


def main():
    """Run all tests."""
    print("\n🔥 scoretrace - Rendering Tests")
    print("=" * 60)

    tests = [value for name, value in sorted(globals().items()) if name.startswith("test_")]
    for test in tests:
        test()

    print("\n" + "=" * 60)
    print("✅ ALL RENDERING TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main()
