"""
Error Taxonomy
==============

Bounded Context: Failure reporting for timeline rendering.

Every failure is fatal to the single render call that raised it. Nothing is
retried internally; retry policy belongs to the caller.

Types:
- ScoreTraceError: base class
- MalformedInputError: a score cannot be interpreted (bad start, duration, depth)
- InvalidConfigurationError: canvas or layout settings are unusable
- SinkWriteError: the rendered artifact could not be persisted
"""

from typing import Optional


class ScoreTraceError(Exception):
    """Base class for all scoretrace errors."""


class MalformedInputError(ScoreTraceError, ValueError):
    """
    A score carries data that cannot be laid out.

    Attributes:
        reason: Message without the score location suffix
        index: Position of the offending score in the input sequence (if known)
        score_name: Name of the offending score (if known)
    """

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        score_name: Optional[str] = None,
    ):
        self.reason = message
        self.index = index
        self.score_name = score_name

        location = []
        if index is not None:
            location.append(f"index={index}")
        if score_name is not None:
            location.append(f"name={score_name!r}")

        if location:
            message = f"{message} (score {', '.join(location)})"
        super().__init__(message)


class InvalidConfigurationError(ScoreTraceError, ValueError):
    """Canvas dimensions or layout options are out of range."""


class SinkWriteError(ScoreTraceError):
    """
    The output destination could not be written.

    Attributes:
        destination: Path that failed
    """

    def __init__(self, message: str, destination: str):
        self.destination = destination
        super().__init__(f"{message}: {destination}")
