"""
Configuration schema for timeline rendering.

This module defines the configuration structure for a render run: canvas
size, output destination and layout presentation settings. Configuration
is loaded from YAML and validated at construction.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple
import yaml

from scoretrace.errors import InvalidConfigurationError
from scoretrace.layout.options import DEFAULT_PALETTE, LayoutOptions, cyclic_color_scheme


@dataclass(frozen=True)
class LayoutConfig:
    """Presentation settings (margins, row height, font, palette)."""

    origin_top: int = 50
    origin_left: int = 30
    line_height: int = 30
    font_size: int = 20
    palette: Tuple[str, ...] = DEFAULT_PALETTE

    def __post_init__(self):
        """Validate layout configuration."""
        # cyclic_color_scheme checks every palette entry, LayoutOptions the numeric ranges
        self.to_options()

    def to_options(self) -> LayoutOptions:
        """Build the LayoutOptions consumed by the layout layer."""
        return LayoutOptions(
            origin_top=self.origin_top,
            origin_left=self.origin_left,
            line_height=self.line_height,
            font_size=self.font_size,
            color_scheme=cyclic_color_scheme(self.palette),
        )


@dataclass(frozen=True)
class RenderConfig:
    """
    Main configuration for a render run.

    Immutable after construction (frozen dataclass).
    """

    canvas_width: int = 1200
    canvas_height: int = 600
    output_destination: Optional[Path] = None
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    def __post_init__(self):
        """Validate render configuration."""
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise InvalidConfigurationError(
                f"canvas dimensions must be positive, got "
                f"{self.canvas_width}x{self.canvas_height}"
            )

        if self.layout.origin_left >= self.canvas_width:
            raise InvalidConfigurationError(
                f"origin_left ({self.layout.origin_left}) must be smaller than "
                f"canvas_width ({self.canvas_width})"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "RenderConfig":
        """
        Build configuration from a parsed mapping.

        Raises:
            InvalidConfigurationError: If keys are unknown or values invalid
        """
        if not isinstance(data, dict):
            raise InvalidConfigurationError(
                f"Render configuration must be a mapping, got {type(data).__name__}"
            )

        layout_data = data.get("layout") or {}
        if not isinstance(layout_data, dict):
            raise InvalidConfigurationError(
                f"'layout' must be a mapping, got {type(layout_data).__name__}"
            )
        layout_data = dict(layout_data)

        if "palette" in layout_data:
            palette = layout_data["palette"]
            if not isinstance(palette, (list, tuple)):
                raise InvalidConfigurationError(
                    f"'palette' must be a list of colors, got {type(palette).__name__}"
                )
            layout_data["palette"] = tuple(palette)

        output_destination = data.get("output_destination")

        try:
            layout = LayoutConfig(**layout_data)
            return cls(
                canvas_width=data.get("canvas_width", 1200),
                canvas_height=data.get("canvas_height", 600),
                output_destination=Path(output_destination) if output_destination else None,
                layout=layout,
            )
        except TypeError as e:
            raise InvalidConfigurationError(f"Invalid render configuration: {e}") from e

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "RenderConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            canvas_width: 1200
            canvas_height: 600
            output_destination: "./runs/timeline.html"

            layout:
              origin_top: 50
              origin_left: 30
              line_height: 30
              font_size: 20
              palette: ["#ff0000", "#00ff00", "#0000ff"]
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise InvalidConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise InvalidConfigurationError(f"Config root must be a mapping: {path}")

        return cls.from_dict(data)

    def with_canvas(self, width: Optional[int] = None, height: Optional[int] = None) -> "RenderConfig":
        """Return a copy with the canvas size overridden where given."""
        return RenderConfig(
            canvas_width=width if width is not None else self.canvas_width,
            canvas_height=height if height is not None else self.canvas_height,
            output_destination=self.output_destination,
            layout=self.layout,
        )
