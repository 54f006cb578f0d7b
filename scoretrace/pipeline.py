"""
Timeline Pipeline Module
========================

Bounded Context: Orchestration of a single render call.

Design:
- Orchestrator: layout -> draw -> serialize -> persist
- Builder pattern: Fluent configuration
- Fail Fast: configuration and input checked before anything is drawn
- Every failure is logged and re-raised, never retried

Stages (in order):
1. Configuration check + scale computation
2. Depth axis
3. Time axis
4. Score rectangles
5. Serialize and persist

Dependencies:
- scoretrace.layout (pure geometry)
- scoretrace.rendering (surface, renderer, sink)
- scoretrace.logging (structured logs)
"""

import os
from dataclasses import dataclass
from typing import Callable, Sequence

from scoretrace.config import RenderConfig
from scoretrace.errors import InvalidConfigurationError, MalformedInputError, SinkWriteError
from scoretrace.layout.options import LayoutOptions
from scoretrace.layout.timeline import TimelineGeometry, build_timeline
from scoretrace.logging import LogEvent, StructuredLogger, create_logger
from scoretrace.rendering.renderer import TimelineRenderer
from scoretrace.rendering.sink import ArtifactSink, FileSink, to_html_fragment
from scoretrace.rendering.surface import CanvasSurface, DrawingSurface
from scoretrace.score import Score
from scoretrace.utils import get_target_run_folder


SurfaceFactory = Callable[[int, int], DrawingSurface]


@dataclass(frozen=True)
class TimelineConfig:
    """
    Everything one render call needs.

    Design:
    - All collaborators injected
    - Immutable after build
    """

    scores: tuple[Score, ...]
    canvas_width: int
    canvas_height: int
    output_destination: str
    options: LayoutOptions
    surface_factory: SurfaceFactory
    sink: ArtifactSink
    renderer: TimelineRenderer
    logger: StructuredLogger


class TimelinePipeline:
    """
    Renders one timeline artifact.

    Usage:
        pipeline = (
            TimelineBuilder()
            .with_scores(scores)
            .with_canvas(1200, 600)
            .with_output("timeline.html")
            .build()
        )

        pipeline.render()
    """

    def __init__(self, config: TimelineConfig):
        self.config = config

    def layout(self) -> TimelineGeometry:
        """
        Compute geometry without drawing.

        Raises:
            InvalidConfigurationError: If canvas or options are out of range
            MalformedInputError: If a score start cannot be resolved
        """
        cfg = self.config
        logger = cfg.logger

        try:
            geometry = build_timeline(
                cfg.scores, cfg.canvas_width, cfg.canvas_height, cfg.options
            )
        except InvalidConfigurationError as e:
            logger.error(
                event=LogEvent.INVALID_CONFIGURATION_ERROR,
                message="Rejected render configuration",
                metadata={'canvas_width': cfg.canvas_width, 'canvas_height': cfg.canvas_height},
                exc_info=e,
            )
            raise
        except MalformedInputError as e:
            logger.error(
                event=LogEvent.MALFORMED_INPUT_ERROR,
                message="Rejected malformed score",
                metadata={'index': e.index, 'score_name': e.score_name},
                exc_info=e,
            )
            raise

        scale = geometry.scale
        logger.info(
            event=LogEvent.SCALE_COMPUTED,
            message="Scale computed",
            metadata={
                'epoch': scale.epoch,
                'max_duration': scale.max_duration,
                'max_depth': scale.max_depth,
                'ratio': scale.ratio,
            },
        )
        if scale.is_degenerate:
            logger.warning(
                event=LogEvent.SCALE_DEGENERATE,
                message="No time extent, rectangles collapse to zero width",
                metadata={'score_count': len(cfg.scores)},
            )

        logger.debug(
            event=LogEvent.LAYOUT_COMPLETED,
            message="Layout completed",
            metadata={
                'rectangles': len(geometry.rectangles),
                'depth_rows': len(geometry.depth_axis.labels),
            },
        )
        return geometry

    def render(self) -> None:
        """
        Lay out, draw and persist the timeline.

        Raises:
            InvalidConfigurationError: If canvas or options are out of range
            MalformedInputError: If a score start cannot be resolved
            SinkWriteError: If the artifact cannot be written

        Drawing failures (e.g. a color scheme returning an unparsable color)
        are logged as error.draw and propagate unchanged.
        """
        cfg = self.config
        logger = cfg.logger

        logger.info(
            event=LogEvent.RENDER_STARTED,
            message=f"Rendering {len(cfg.scores)} scores",
            metadata={
                'score_count': len(cfg.scores),
                'canvas_width': cfg.canvas_width,
                'canvas_height': cfg.canvas_height,
            },
        )

        geometry = self.layout()

        try:
            surface = cfg.surface_factory(cfg.canvas_width, cfg.canvas_height)
            cfg.renderer.draw(surface, geometry)
            payload = to_html_fragment(surface.to_data_url())
        except Exception as e:
            logger.error(
                event=LogEvent.DRAW_ERROR,
                message="Failed to draw timeline",
                metadata={'destination': cfg.output_destination},
                exc_info=e,
            )
            raise

        try:
            cfg.sink.write(cfg.output_destination, payload)
        except SinkWriteError as e:
            logger.error(
                event=LogEvent.SINK_WRITE_ERROR,
                message="Failed to write artifact",
                metadata={'destination': cfg.output_destination},
                exc_info=e,
            )
            raise

        logger.info(
            event=LogEvent.ARTIFACT_WRITTEN,
            message="Timeline written",
            metadata={'destination': cfg.output_destination, 'bytes': len(payload)},
        )
        logger.info(
            event=LogEvent.RENDER_COMPLETED,
            message="Render completed",
            metadata={'destination': cfg.output_destination},
        )


class TimelineBuilder:
    """
    Fluent builder for TimelinePipeline.

    Usage:
        pipeline = (
            TimelineBuilder()
            .with_scores(scores)
            .with_config(RenderConfig.from_yaml("render.yaml"))
            .build()
        )
    """

    def __init__(self):
        self._scores: tuple[Score, ...] = ()
        self._canvas_width: int = 1200
        self._canvas_height: int = 600
        self._output_destination: str | None = None
        self._options: LayoutOptions | None = None
        self._surface_factory: SurfaceFactory = CanvasSurface
        self._sink: ArtifactSink | None = None
        self._renderer: TimelineRenderer | None = None
        self._logger: StructuredLogger | None = None
        self._runs_dir: str = "./runs"

    def with_scores(self, scores: Sequence[Score]) -> "TimelineBuilder":
        """Set the scores to draw."""
        self._scores = tuple(scores)
        return self

    def with_canvas(self, width: int, height: int) -> "TimelineBuilder":
        """Set canvas size in pixels."""
        self._canvas_width = width
        self._canvas_height = height
        return self

    def with_output(self, destination: str) -> "TimelineBuilder":
        """Set artifact destination path."""
        self._output_destination = str(destination)
        return self

    def with_options(self, options: LayoutOptions) -> "TimelineBuilder":
        """Set layout options."""
        self._options = options
        return self

    def with_config(self, config: RenderConfig) -> "TimelineBuilder":
        """Apply canvas size, destination and layout from a RenderConfig."""
        self._canvas_width = config.canvas_width
        self._canvas_height = config.canvas_height
        if config.output_destination is not None:
            self._output_destination = str(config.output_destination)
        self._options = config.layout.to_options()
        return self

    def with_surface_factory(self, factory: SurfaceFactory) -> "TimelineBuilder":
        """Set the callable creating a surface from (width, height)."""
        self._surface_factory = factory
        return self

    def with_sink(self, sink: ArtifactSink) -> "TimelineBuilder":
        """Set artifact sink."""
        self._sink = sink
        return self

    def with_renderer(self, renderer: TimelineRenderer) -> "TimelineBuilder":
        """Set renderer (styles)."""
        self._renderer = renderer
        return self

    def with_logger(self, logger: StructuredLogger) -> "TimelineBuilder":
        """Set structured logger."""
        self._logger = logger
        return self

    def with_runs_dir(self, runs_dir: str) -> "TimelineBuilder":
        """Set the base folder for the default timestamped output (default: ./runs)."""
        self._runs_dir = str(runs_dir)
        return self

    def build(self) -> TimelinePipeline:
        """
        Build the pipeline.

        Returns:
            Configured pipeline
        """
        if self._output_destination is None:
            self._output_destination = os.path.join(
                get_target_run_folder(application_name='timeline', base_dir=self._runs_dir),
                'timeline.html',
            )

        config = TimelineConfig(
            scores=self._scores,
            canvas_width=self._canvas_width,
            canvas_height=self._canvas_height,
            output_destination=self._output_destination,
            options=self._options or LayoutOptions(),
            surface_factory=self._surface_factory,
            sink=self._sink or FileSink(),
            renderer=self._renderer or TimelineRenderer(),
            logger=self._logger or create_logger("pipeline"),
        )

        return TimelinePipeline(config)


def render_timeline(
    scores: Sequence[Score],
    canvas_width: int,
    canvas_height: int,
    output_destination: str,
    options: LayoutOptions | None = None,
    surface_factory: SurfaceFactory = CanvasSurface,
    sink: ArtifactSink | None = None,
    logger: StructuredLogger | None = None,
) -> None:
    """
    Render scores as a timeline image and persist it.

    Args:
        scores: Scores to draw
        canvas_width: Canvas width (pixels)
        canvas_height: Canvas height (pixels)
        output_destination: Path of the HTML fragment to (over)write
        options: Layout options (defaults to LayoutOptions())
        surface_factory: Creates the drawing surface for this call
        sink: Artifact sink (defaults to FileSink())
        logger: Structured logger (defaults to the "pipeline" logger)

    Raises:
        InvalidConfigurationError: If canvas or options are out of range
        MalformedInputError: If a score start cannot be resolved
        SinkWriteError: If the artifact cannot be written
    """
    builder = (
        TimelineBuilder()
        .with_scores(scores)
        .with_canvas(canvas_width, canvas_height)
        .with_output(output_destination)
        .with_surface_factory(surface_factory)
    )
    if options is not None:
        builder.with_options(options)
    if sink is not None:
        builder.with_sink(sink)
    if logger is not None:
        builder.with_logger(logger)

    builder.build().render()
