"""
scoretrace CLI - Main entry point.

Provides command-line interface for rendering score files as timelines.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import yaml

from scoretrace.config import RenderConfig
from scoretrace.errors import MalformedInputError, ScoreTraceError
from scoretrace.layout.scale import compute_scale
from scoretrace.logging import LogEvent, create_logger
from scoretrace.pipeline import TimelineBuilder
from scoretrace.score import Score


def load_scores(scores_path: str) -> List[Score]:
    """
    Load scores from a JSON or YAML file.

    The document is either a list of score mappings or a mapping with a
    "scores" key holding that list.

    Args:
        scores_path: Path to .json / .yaml / .yml file

    Returns:
        Scores in document order

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the path cannot be read (e.g. a directory)
        MalformedInputError: If the document or a score is invalid
    """
    path = Path(scores_path)

    if not path.exists():
        raise FileNotFoundError(f"Scores file not found: {scores_path}")

    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data: Any = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise MalformedInputError(f"Invalid scores document {scores_path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("scores")
    if data is None:
        data = []
    if not isinstance(data, list):
        raise MalformedInputError(
            f"Scores document must be a list or contain a 'scores' list: {scores_path}"
        )

    return [Score.from_dict(item, index=i) for i, item in enumerate(data)]


def load_render_config(config_path: Optional[str], width: Optional[int], height: Optional[int]) -> RenderConfig:
    """Load RenderConfig from YAML (or defaults) and apply CLI overrides."""
    config = RenderConfig.from_yaml(Path(config_path)) if config_path else RenderConfig()
    return config.with_canvas(width=width, height=height)


def cmd_render(args: argparse.Namespace) -> None:
    logger = create_logger("cli", level=logging.DEBUG if args.verbose else logging.WARNING)
    pipeline_logger = create_logger("pipeline", level=logging.DEBUG if args.verbose else logging.WARNING)

    scores = load_scores(args.scores)
    logger.info(
        event=LogEvent.SCORES_LOADED,
        message=f"Loaded {len(scores)} scores",
        metadata={'source': args.scores, 'score_count': len(scores)},
    )

    config = load_render_config(args.config, args.width, args.height)

    builder = TimelineBuilder().with_scores(scores).with_config(config).with_logger(pipeline_logger)
    if args.output:
        builder.with_output(args.output)

    pipeline = builder.build()
    pipeline.render()

    print(pipeline.config.output_destination)


def cmd_inspect(args: argparse.Namespace) -> None:
    scores = load_scores(args.scores)
    config = load_render_config(args.config, args.width, None)

    scale = compute_scale(scores, config.canvas_width, config.layout.origin_left)

    print(f"scores:       {len(scores)}")
    print(f"epoch:        {scale.epoch}")
    print(f"max_duration: {scale.max_duration}")
    print(f"max_depth:    {scale.max_depth}")
    print(f"ratio:        {scale.ratio}")
    if scale.is_degenerate:
        print("degenerate:   true (no time extent)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scoretrace",
        description="scoretrace CLI - Render timed, nested scores as a timeline image",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render to a timestamped run folder
  scoretrace render scores.json

  # Render with explicit output and canvas size
  scoretrace render scores.yaml -o timeline.html --width 1600 --height 400

  # Render with a YAML render config
  scoretrace render scores.json --config config/render.yaml

  # Print the scale model only
  scoretrace inspect scores.json --width 500
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # render command
    render = subparsers.add_parser('render', help='Render scores to an HTML image fragment')
    render.add_argument('scores', help='Path to scores file (.json, .yaml)')
    render.add_argument('-o', '--output', help='Output path (default: ./runs/timeline/<timestamp>/timeline.html)')
    render.add_argument('--config', help='Path to render config YAML')
    render.add_argument('--width', type=int, help='Canvas width in pixels')
    render.add_argument('--height', type=int, help='Canvas height in pixels')
    render.add_argument('-v', '--verbose', action='store_true', help='Emit structured debug logs')
    render.set_defaults(handler=cmd_render)

    # inspect command
    inspect = subparsers.add_parser('inspect', help='Print the scale model without rendering')
    inspect.add_argument('scores', help='Path to scores file (.json, .yaml)')
    inspect.add_argument('--config', help='Path to render config YAML')
    inspect.add_argument('--width', type=int, help='Canvas width in pixels')
    inspect.set_defaults(handler=cmd_inspect)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.handler(args)
    except (ScoreTraceError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
