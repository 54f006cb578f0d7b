"""
Scale Model Module
==================

Derives the shared time-to-pixel mapping from the full score set.

Design:
- Computed once per render call, then passed unchanged to every layout step
- Pure function, no side effects
- Degenerate input (no scores, or every duration 0) yields ratio 0.0
  instead of a division by zero
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from scoretrace.errors import InvalidConfigurationError, MalformedInputError
from scoretrace.score import Score, to_instant


@dataclass(frozen=True)
class ScaleModel:
    """
    Shared scale for one timeline.

    Attributes:
        epoch: Earliest start instant (ms since Unix epoch), None without scores
        max_duration: Longest duration (ms), 0 without scores
        max_depth: Deepest nesting level, 0 without scores
        ratio: Pixels per millisecond, 0.0 when max_duration is 0
    """

    epoch: Optional[float]
    max_duration: float
    max_depth: int
    ratio: float

    @property
    def is_degenerate(self) -> bool:
        """True when there is no time extent to scale."""
        return self.max_duration == 0

    def offset_of(self, score: Score) -> float:
        """Milliseconds between the epoch and the score start."""
        if self.epoch is None:
            return 0.0
        return to_instant(score.start) - self.epoch


def compute_scale(
    scores: Sequence[Score],
    canvas_width: int,
    left_margin: int,
) -> ScaleModel:
    """
    Compute epoch, max duration, max depth and ratio.

    Args:
        scores: Full input set, in any order
        canvas_width: Canvas width in pixels
        left_margin: Horizontal origin offset in pixels

    Returns:
        ScaleModel shared by axis and event layout

    Raises:
        InvalidConfigurationError: If canvas_width or left_margin are out of range
        MalformedInputError: If a score start cannot be resolved
    """
    if canvas_width <= 0:
        raise InvalidConfigurationError(f"canvas_width must be > 0, got {canvas_width}")
    if left_margin <= 0:
        raise InvalidConfigurationError(f"left_margin must be > 0, got {left_margin}")
    if left_margin >= canvas_width:
        raise InvalidConfigurationError(
            f"left_margin ({left_margin}) must be smaller than canvas_width ({canvas_width})"
        )

    epoch: Optional[float] = None
    max_duration: float = 0
    max_depth = 0

    for index, score in enumerate(scores):
        try:
            instant = to_instant(score.start)
        except MalformedInputError as e:
            raise MalformedInputError(e.reason, index=index, score_name=score.name) from e

        if epoch is None or instant < epoch:
            epoch = instant
        if score.duration > max_duration:
            max_duration = score.duration
        if score.depth > max_depth:
            max_depth = score.depth

    if max_duration > 0:
        ratio = (canvas_width - left_margin) / max_duration
    else:
        ratio = 0.0

    return ScaleModel(
        epoch=epoch,
        max_duration=max_duration,
        max_depth=max_depth,
        ratio=ratio,
    )
