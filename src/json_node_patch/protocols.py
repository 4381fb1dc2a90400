"""DocumentStore Protocol: the seam to the authoritative document owner.

The patch engine never owns the document.  It reads the current text and
hands back replacement text through any object with these two methods; no
inheritance required.

Example::

    from json_node_patch.protocols import DocumentStore

    class EditorBuffer:
        def __init__(self) -> None:
            self.text = "{}"

        def get_document_text(self) -> str | None:
            return self.text

        def set_document_text(self, text: str) -> None:
            self.text = text

    assert isinstance(EditorBuffer(), DocumentStore)  # structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["DocumentStore"]


@runtime_checkable
class DocumentStore(Protocol):
    """Structural protocol for the owner of the document text.

    - ``get_document_text`` returns the current JSON text, or None when no
      document is loaded.
    - ``set_document_text`` replaces the text wholesale and propagates it to
      whatever storage or export the owner maintains.
    """

    def get_document_text(self) -> str | None: ...

    def set_document_text(self, text: str) -> None: ...
