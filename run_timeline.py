"""
Timeline Demo
=============

Demonstrates scoretrace package usage.

Example: Render a small request trace (request -> auth/query -> parse/fetch).

Architecture:
- layout: ScaleModel, axes, rectangles (pure geometry)
- rendering: CanvasSurface, TimelineRenderer, FileSink
- pipeline: Orchestration
"""

from datetime import datetime, timedelta, timezone

from scoretrace import (
    LayoutOptions,
    Score,
    TimelineBuilder,
    TimelineRenderer,
    cyclic_color_scheme,
)


def build_scores() -> list[Score]:
    """Synthetic trace with three nesting levels and one zero-length event."""
    t0 = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)

    def at(ms: float) -> datetime:
        return t0 + timedelta(milliseconds=ms)

    return [
        Score(name="request", start=at(0), duration=120, depth=0),
        Score(name="auth", start=at(5), duration=15, depth=1),
        Score(name="query", start=at(25), duration=60, depth=1),
        Score(name="parse", start=at(30), duration=12.5, depth=2),
        Score(name="fetch", start=at(45), duration=35, depth=2),
        Score(name="flush", start=at(110), duration=0, depth=1),
    ]


def main():
    """Render the demo trace using the builder API."""
    scores = build_scores()

    options = LayoutOptions(
        origin_top=50,
        origin_left=30,
        line_height=30,
        font_size=16,
        color_scheme=cyclic_color_scheme(["#e4572e", "#f3a712", "#29335c"]),
    )

    pipeline = (
        TimelineBuilder()
        .with_scores(scores)
        .with_canvas(1200, 300)
        .with_options(options)
        .with_renderer(TimelineRenderer(axis_color="#333333"))
        .build()
    )

    print("Rendering timeline...")
    print(f"  Scores: {len(scores)}")
    print()

    geometry = pipeline.layout()
    pipeline.render()

    print("✓ Timeline rendered!")
    print(f"  Output: {pipeline.config.output_destination}")
    print(f"  Ratio:  {geometry.scale.ratio:.3f} px/ms")


if __name__ == "__main__":
    main()
