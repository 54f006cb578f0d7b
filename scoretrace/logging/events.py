"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <category>.<action>

    category: render, scale, layout, artifact, scores, error
    action: started, computed, completed, written, ...

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.score_count
    | filter event = "render.completed"
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - render.*: Render call lifecycle
    - scale.* / layout.*: Layout stages
    - artifact.*: Persistence
    - scores.*: Input loading
    - error.*: Error conditions
    """

    # ========== Render Lifecycle ==========
    RENDER_STARTED = "render.started"
    """Render call accepted its input."""

    RENDER_COMPLETED = "render.completed"
    """Artifact written, render call finished."""

    # ========== Layout ==========
    SCALE_COMPUTED = "scale.computed"
    """Epoch, ratio, max duration and max depth derived."""

    SCALE_DEGENERATE = "scale.degenerate"
    """No time extent (no scores or all durations 0); ratio forced to 0."""

    LAYOUT_COMPLETED = "layout.completed"
    """Axes and rectangles laid out."""

    # ========== Persistence / Input ==========
    ARTIFACT_WRITTEN = "artifact.written"
    """Rendered artifact persisted to its destination."""

    SCORES_LOADED = "scores.loaded"
    """Scores parsed from an input document."""

    # ========== Error Events ==========
    MALFORMED_INPUT_ERROR = "error.malformed_input"
    """A score could not be interpreted."""

    INVALID_CONFIGURATION_ERROR = "error.invalid_configuration"
    """Canvas or layout settings rejected."""

    DRAW_ERROR = "error.draw"
    """Drawing or image serialization failed."""

    SINK_WRITE_ERROR = "error.sink_write"
    """Artifact could not be persisted."""
