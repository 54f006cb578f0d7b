"""
scoretrace v1.0
===============

Bounded Context: Flame-graph style timelines of timed, nested scores.

Design Philosophy:
- Separation of Concerns: Geometry, Layout, Rendering separated
- One shared scale per timeline: axes and rectangles never disagree
- Pragmatismo > Purismo: supervision draws, OpenCV encodes

Architecture:

    scoretrace/
    ├── score.py           # Score (immutable input), to_instant
    ├── errors.py          # MalformedInputError, InvalidConfigurationError, SinkWriteError
    ├── config.py          # RenderConfig, LayoutConfig (YAML)
    ├── geometry/          # Pure shapes (immutable)
    │   └── shapes.py      # Point, Line, Label, Tick, Rectangle, axes
    │
    ├── layout/            # Timing data -> pixels (pure functions)
    │   ├── scale.py       # ScaleModel, compute_scale
    │   ├── axis.py        # depth axis, time axis
    │   ├── events.py      # score rectangles
    │   └── timeline.py    # build_timeline
    │
    ├── rendering/         # Drawing + persistence
    │   ├── surface.py     # DrawingSurface, CanvasSurface
    │   ├── renderer.py    # TimelineRenderer
    │   └── sink.py        # ArtifactSink, FileSink
    │
    ├── logging/           # Structured JSON logs
    └── pipeline.py        # Orchestration (render_timeline, TimelineBuilder)

Usage:

    from scoretrace import Score, render_timeline

    scores = [
        Score(name="request", start="2024-05-01T12:00:00Z", duration=100, depth=0),
        Score(name="db", start="2024-05-01T12:00:00.010Z", duration=50, depth=1),
    ]
    render_timeline(scores, canvas_width=500, canvas_height=200,
                    output_destination="timeline.html")

    # Or geometry only (no drawing)
    from scoretrace import build_timeline
    geometry = build_timeline(scores, canvas_width=500, canvas_height=200)
    geometry.scale.ratio  # 4.7
"""

from scoretrace.score import Score, to_instant
from scoretrace.errors import (
    ScoreTraceError,
    MalformedInputError,
    InvalidConfigurationError,
    SinkWriteError,
)
from scoretrace.config import RenderConfig, LayoutConfig

# Layout Layer (pure)
from scoretrace.layout import (
    LayoutOptions,
    ScaleModel,
    TimelineGeometry,
    build_timeline,
    compute_scale,
    cyclic_color_scheme,
    depth_color_scheme,
)

# Rendering Layer
from scoretrace.rendering import CanvasSurface, FileSink, TimelineRenderer

# Pipeline (orchestration)
from scoretrace.pipeline import TimelinePipeline, TimelineBuilder, render_timeline

__all__ = [
    # Input
    "Score",
    "to_instant",
    # Errors
    "ScoreTraceError",
    "MalformedInputError",
    "InvalidConfigurationError",
    "SinkWriteError",
    # Config
    "RenderConfig",
    "LayoutConfig",
    # Layout
    "LayoutOptions",
    "ScaleModel",
    "TimelineGeometry",
    "build_timeline",
    "compute_scale",
    "cyclic_color_scheme",
    "depth_color_scheme",
    # Rendering
    "CanvasSurface",
    "FileSink",
    "TimelineRenderer",
    # Pipeline
    "TimelinePipeline",
    "TimelineBuilder",
    "render_timeline",
]

__version__ = "1.0.0"
