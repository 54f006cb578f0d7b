"""
Artifact Sink Module
====================

Persists the rendered timeline.

Design:
- ArtifactSink (abstract): write(destination, payload)
- FileSink (concrete): overwrite a file on disk
- Write failures surface as SinkWriteError, never retried
"""

from abc import ABC, abstractmethod
from pathlib import Path

from scoretrace.errors import SinkWriteError


def to_html_fragment(data_url: str) -> str:
    """Wrap an image data URL in a minimal HTML fragment."""
    return f'<img src="{data_url}" />\n'


class ArtifactSink(ABC):
    """Abstract output destination."""

    @abstractmethod
    def write(self, destination: str, payload: str) -> None:
        """
        Persist payload at destination, replacing existing content.

        Raises:
            SinkWriteError: If the destination cannot be written
        """


class FileSink(ArtifactSink):
    """
    Writes payloads to the local filesystem.

    Attributes:
        create_parents: Create missing parent directories before writing
        encoding: Text encoding of the written file
    """

    def __init__(self, create_parents: bool = False, encoding: str = "utf-8"):
        self.create_parents = create_parents
        self.encoding = encoding

    def write(self, destination: str, payload: str) -> None:
        path = Path(destination)
        try:
            if self.create_parents:
                path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding=self.encoding)
        except OSError as e:
            raise SinkWriteError(f"Cannot write artifact ({e.strerror or e})", str(destination)) from e
