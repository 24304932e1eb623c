"""RelationSource — where relation text comes from.

A path on disk, or ``-`` for standard input. Text is read once per
invocation and cached on the instance.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

STDIN = "-"


class SourceNotFoundError(FileNotFoundError):
    """The relation source path does not exist or is not a file."""


class RelationSource:
    """Lazy reader for a relation list."""

    def __init__(self, location: str | Path = STDIN, *, text: str | None = None) -> None:
        self.location = str(location)
        self._text = text

    @classmethod
    def from_text(cls, text: str, *, name: str = "<text>") -> RelationSource:
        """Wrap in-memory text (tests, embedding callers)."""
        return cls(name, text=text)

    @property
    def is_stdin(self) -> bool:
        return self.location == STDIN

    def read_text(self) -> str:
        """Return the full relation text, reading it on first access."""
        if self._text is None:
            self._text = self._read()
        return self._text

    def _read(self) -> str:
        if self.is_stdin:
            logger.debug("Reading relations from stdin")
            return sys.stdin.read()
        path = Path(self.location)
        if not path.is_file():
            msg = f"Relation source '{self.location}' not found"
            raise SourceNotFoundError(msg)
        logger.debug("Reading relations from %s", path)
        return path.read_text(encoding="utf-8")
