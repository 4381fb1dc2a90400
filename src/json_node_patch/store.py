"""Document stores satisfying the ``DocumentStore`` Protocol.

- ``InMemoryDocumentStore``: holds the text in memory; useful for hosts that
  keep their own buffer and for tests.
- ``FileDocumentStore``: reads and writes a UTF-8 JSON file.  Writes go to a
  temporary sibling file that then replaces the target, so a reader never
  sees a half-written document.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

__all__ = ["FileDocumentStore", "InMemoryDocumentStore"]

logger = logging.getLogger(__name__)


class InMemoryDocumentStore:
    """Keeps the document text in memory.

    Args:
        text: Initial document text, or None for "no document loaded".
    """

    def __init__(self, text: str | None = None) -> None:
        self._text = text
        self.writes = 0

    def get_document_text(self) -> str | None:
        return self._text

    def set_document_text(self, text: str) -> None:
        self._text = text
        self.writes += 1


class FileDocumentStore:
    """Keeps the document text in a file on disk.

    A missing file reads as None.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get_document_text(self) -> str | None:
        try:
            return self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set_document_text(self, text: str) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
                fh.write(text)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("wrote %d characters to %s", len(text), self._path)
