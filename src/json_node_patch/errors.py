"""Exception hierarchy for the patch cycle."""

from __future__ import annotations

__all__ = ["InvalidDocumentError", "PatchError", "UnresolvedPathError"]


class PatchError(Exception):
    """Base class for failures of a patch cycle."""


class InvalidDocumentError(PatchError, ValueError):
    """The document text is missing, blank or not valid JSON.

    The document is left untouched whenever this is raised.
    """


class UnresolvedPathError(PatchError, LookupError):
    """A structural path does not lead to a value in the document."""

    def __init__(self, path: tuple[str | int, ...], depth: int) -> None:
        self.path = path
        self.depth = depth
        super().__init__(f"path {list(path)!r} does not resolve at segment {depth}")
