"""
Score Schema
============

Bounded Context: Input data for timeline rendering.

A Score is one named, timed, depth-tagged interval. Scores are supplied by
the caller and never mutated.

Design:
- Immutability: frozen=True prevents accidental mutation
- Validation: constructor checks duration and depth
- Start values are kept as supplied and resolved lazily by to_instant(),
  so the scale model can report which score is malformed

Accepted start representations:
- datetime (naive values are treated as UTC)
- date (midnight UTC, as YAML loads unquoted dates)
- ISO 8601 string as read by datetime.fromisoformat on Python 3.11+
  ("2024-05-01T12:00:00.250Z", "2024-05-01T12:00:00.5Z")
- milliseconds since the Unix epoch (int or float)
"""

import math
from dataclasses import dataclass, asdict
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Union

from scoretrace.errors import MalformedInputError


StartValue = Union[datetime, date, str, int, float]

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True)
class Score:
    """
    Immutable timed interval.

    Attributes:
        name: Display label (may be empty, not unique)
        start: Absolute start timestamp
        duration: Length in milliseconds (>= 0)
        depth: Nesting level (>= 0), independent of other scores

    Example:
        >>> score = Score(name="parse", start="2024-05-01T12:00:00Z", duration=12.5, depth=1)
        >>> score.to_dict()
        {'name': 'parse', 'start': '2024-05-01T12:00:00Z', 'duration': 12.5, 'depth': 1}
    """

    name: str
    start: StartValue
    duration: float
    depth: int = 0

    def __post_init__(self):
        """Validate invariants."""
        if isinstance(self.duration, bool) or not isinstance(self.duration, (int, float)):
            raise MalformedInputError(
                f"duration must be a number, got {type(self.duration).__name__}",
                score_name=self.name,
            )
        if math.isnan(self.duration) or math.isinf(self.duration) or self.duration < 0:
            raise MalformedInputError(
                f"duration must be a finite number >= 0, got {self.duration}",
                score_name=self.name,
            )
        if isinstance(self.depth, bool) or not isinstance(self.depth, int):
            raise MalformedInputError(
                f"depth must be an integer, got {type(self.depth).__name__}",
                score_name=self.name,
            )
        if self.depth < 0:
            raise MalformedInputError(
                f"depth must be >= 0, got {self.depth}",
                score_name=self.name,
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        data = asdict(self)
        if isinstance(self.start, date):
            data["start"] = self.start.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], index: int | None = None) -> "Score":
        """Deserialize from dict.

        Args:
            data: Dictionary with keys: name, start, duration, depth
            index: Position in the source document, used in error messages

        Returns:
            Score instance

        Raises:
            MalformedInputError: If required keys are missing or invalid
        """
        if not isinstance(data, dict):
            raise MalformedInputError(
                f"score must be a mapping, got {type(data).__name__}", index=index
            )

        name = data.get("name")
        name = "" if name is None else str(name)
        try:
            return cls(
                name=name,
                start=data["start"],
                duration=data["duration"],
                depth=data.get("depth", 0),
            )
        except KeyError as e:
            raise MalformedInputError(
                f"Missing required score field: {e}", index=index, score_name=name
            ) from e
        except MalformedInputError as e:
            raise MalformedInputError(
                e.reason, index=index, score_name=name
            ) from e


def to_instant(start: Any) -> float:
    """
    Resolve a start value to milliseconds since the Unix epoch.

    Args:
        start: datetime, date, ISO 8601 string or epoch milliseconds

    Returns:
        Comparable instant in milliseconds

    Raises:
        MalformedInputError: If the value cannot be resolved
    """
    if isinstance(start, bool):
        raise MalformedInputError(f"start must be a timestamp, got {start!r}")

    if isinstance(start, (int, float)):
        if math.isnan(start) or math.isinf(start):
            raise MalformedInputError(f"start must be finite, got {start!r}")
        return float(start)

    if isinstance(start, str):
        text = start.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            start = datetime.fromisoformat(text)
        except ValueError as e:
            raise MalformedInputError(f"Invalid ISO timestamp: {start!r}") from e

    if isinstance(start, datetime):
        if start.tzinfo is None:
            start = start.replace(tzinfo=timezone.utc)
        return (start - _UNIX_EPOCH) / _ONE_MS

    if isinstance(start, date):
        midnight = datetime(start.year, start.month, start.day, tzinfo=timezone.utc)
        return (midnight - _UNIX_EPOCH) / _ONE_MS

    raise MalformedInputError(
        f"start must be a datetime, date, ISO string or epoch milliseconds, "
        f"got {type(start).__name__}"
    )
