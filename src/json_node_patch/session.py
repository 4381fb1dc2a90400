"""EditSession: the edit cycle for one inspected node.

Tracks the selected node, the edit form derived from it and whether the
inspector is in edit mode, and runs the save cycle against a
``DocumentStore``.

Lifecycle:
- ``select()`` replaces the snapshot, re-seeds the form and leaves edit mode.
- ``update()`` changes the text of one form field.
- ``cancel()`` discards edits, re-seeds the form and leaves edit mode.
- ``save()`` patches the store's document and commits the new text only if
  something changed.  An invalid document leaves the store untouched and
  the error propagates to the host, which reports it to the user.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from json_node_patch.config import EditorConfig
from json_node_patch.errors import InvalidDocumentError
from json_node_patch.paths.formatter import format_path
from json_node_patch.patch.applicator import PatchApplicator
from json_node_patch.rows.nodes import FormField, NodeSelection, form_from_rows
from json_node_patch.rows.normalizer import RowNormalizer

if TYPE_CHECKING:
    from json_node_patch.protocols import DocumentStore
    from json_node_patch.result import PatchResult

__all__ = ["EditSession"]

logger = logging.getLogger(__name__)

_normalizer = RowNormalizer()


class EditSession:
    """Edit state of the node inspector.

    Args:
        store:     Owner of the authoritative document text.
        selection: Currently selected node; None until a node is selected.
        config:    Serialization settings.  Defaults to ``EditorConfig()``.
    """

    def __init__(
        self,
        store: DocumentStore,
        selection: NodeSelection | None = None,
        config: EditorConfig | None = None,
    ) -> None:
        self._store = store
        self._config = config if config is not None else EditorConfig()
        self._applicator = PatchApplicator(self._config)
        self._selection = selection if selection is not None else NodeSelection()
        self._form: list[FormField] = form_from_rows(self._selection.rows)
        self.edit_mode = False

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def selection(self) -> NodeSelection:
        return self._selection

    @property
    def form(self) -> tuple[FormField, ...]:
        return tuple(self._form)

    @property
    def has_editable_fields(self) -> bool:
        return bool(self._form)

    @property
    def content(self) -> str:
        """Pretty-printed content of the selected node."""
        return _normalizer.render(self._selection.rows, self._config)

    @property
    def json_path(self) -> str:
        return format_path(self._selection.path)

    # ------------------------------------------------------------------
    # State changes
    # ------------------------------------------------------------------

    def select(self, selection: NodeSelection) -> None:
        self._selection = selection
        self._reset()

    def toggle_edit(self) -> bool:
        self.edit_mode = not self.edit_mode
        return self.edit_mode

    def update(self, index: int, text: str) -> None:
        """Set the text of the form field at ``index``.

        Raises:
            IndexError: If there is no field at ``index``.
        """
        self._form[index] = self._form[index].with_value(text)

    def cancel(self) -> None:
        self._reset()

    def save(self) -> PatchResult:
        """Apply the form to the store's document and commit the result.

        Returns:
            The ``PatchResult``; the store is written only when its outcome
            is MUTATED.

        Raises:
            InvalidDocumentError: If the store's text is missing or not valid
                JSON.  The store is left as it was and edit mode is kept.
        """
        try:
            result = self._applicator.apply(
                self._store.get_document_text(),
                self._selection.path,
                self._selection.node,
                self._form,
            )
        except InvalidDocumentError:
            logger.error("failed to apply edits at %s", self.json_path, exc_info=True)
            raise

        if result.changed:
            self._store.set_document_text(result.text)
            logger.info("saved %d field(s) at %s", len(self._form), self.json_path)
        else:
            logger.debug("nothing saved at %s: %s", self.json_path, result.reason)
        self.edit_mode = False
        return result

    def _reset(self) -> None:
        self._form = form_from_rows(self._selection.rows)
        self.edit_mode = False
