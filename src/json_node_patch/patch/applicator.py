"""PatchApplicator: merge edited form fields back into the full document.

One call is one patch cycle:

1. Parse the document text into a fresh working copy.  Missing, blank or
   invalid text raises ``InvalidDocumentError`` before anything is touched.
2. Write the coerced field values into the working copy:
   - ``ScalarNode``: the value replaces the node itself.  For the root path
     the whole document is replaced; otherwise the value is assigned into
     the resolved parent under the last segment.
   - ``ContainerNode``: the object at the full path receives one assignment
     per keyed field; keys not in the form, including nested arrays and
     objects, are left as they are.
3. Re-serialize the whole working copy with the configured indent.

When the target cannot be reached (the document changed shape since the node
was selected) the cycle is a no-op and reports ``PatchOutcome.UNCHANGED``
together with the original text.  The caller's document is never mutated;
only the returned text is meant to be committed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from json_node_patch.config import EditorConfig
from json_node_patch.errors import InvalidDocumentError
from json_node_patch.patch.coercer import coerce, loads_strict
from json_node_patch.paths.resolver import assign, resolve, walk
from json_node_patch.result import PatchOutcome, PatchResult
from json_node_patch.rows.nodes import (
    MISSING,
    ContainerNode,
    EditableNode,
    FormField,
    ScalarNode,
    Segment,
)

__all__ = ["PatchApplicator", "field_value"]

logger = logging.getLogger(__name__)


def field_value(form_field: FormField) -> Any:
    """Return the JSON value to write for one form field.

    Untouched fields give back the value they were seeded from, so that
    re-submitting an unmodified form reproduces the document exactly (a
    string such as ``"123"`` is not turned into a number).  Edited fields
    are coerced.
    """
    if not form_field.is_modified:
        return form_field.original
    return coerce(form_field.value)


class PatchApplicator:
    """Applies form edits to a JSON document text.

    Holds only the serialization settings; every ``apply()`` call parses its
    own working copy, so an instance can be reused freely.

    Example::

        applicator = PatchApplicator()
        result = applicator.apply(
            '{"customer": {"name": "Bob", "age": 30}}',
            ("customer",),
            ContainerNode(),
            [FormField("age", "31")],
        )
        result.text       # '{\\n  "customer": {\\n    "name": "Bob",\\n    "age": 31 ...'
        result.outcome    # PatchOutcome.MUTATED
    """

    def __init__(self, config: EditorConfig | None = None) -> None:
        self._config: EditorConfig = config if config is not None else EditorConfig()

    @property
    def config(self) -> EditorConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def apply(
        self,
        document_text: str | None,
        path: Sequence[Segment],
        node: EditableNode,
        form: Sequence[FormField],
    ) -> PatchResult:
        """Run one patch cycle.

        Args:
            document_text: Current authoritative document text.
            path:          Structural path of the edited node.
            node:          Shape of the edited node (``ScalarNode`` or
                           ``ContainerNode``), decided at selection time.
            form:          Edited fields, in form order.

        Returns:
            A ``PatchResult`` whose ``text`` is the document to commit.

        Raises:
            InvalidDocumentError: If ``document_text`` is missing, blank or
                not valid JSON.
        """
        if document_text is None or not document_text.strip():
            raise InvalidDocumentError("document text is empty")
        document = self._parse(document_text)
        path = tuple(path)

        if isinstance(node, ScalarNode):
            return self._apply_scalar(document_text, document, path, form)
        if isinstance(node, ContainerNode):
            return self._apply_container(document_text, document, path, form)
        raise TypeError(f"Unsupported node shape: {type(node)!r}")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _parse(self, document_text: str) -> Any:
        try:
            return loads_strict(document_text)
        except (ValueError, RecursionError) as exc:
            raise InvalidDocumentError(f"document is not valid JSON: {exc}") from exc

    def _apply_scalar(
        self,
        original_text: str,
        document: Any,
        path: tuple[Segment, ...],
        form: Sequence[FormField],
    ) -> PatchResult:
        value = field_value(form[0]) if form else coerce("")

        if not path:
            return self._mutated(value)

        resolution = resolve(document, path)
        if not resolution.resolved or resolution.last_segment is None:
            return self._unchanged(original_text, path, "unresolved path")
        if not assign(resolution.parent, resolution.last_segment, value):
            return self._unchanged(original_text, path, "unresolved path")
        return self._mutated(document)

    def _apply_container(
        self,
        original_text: str,
        document: Any,
        path: tuple[Segment, ...],
        form: Sequence[FormField],
    ) -> PatchResult:
        target = walk(document, path)
        if not isinstance(target, dict):
            if target is MISSING:
                reason = "unresolved path"
            else:
                reason = "target is not an object"
            return self._unchanged(original_text, path, reason)

        keyed = [f for f in form if f.key is not None]
        if not keyed:
            return self._unchanged(original_text, path, "no editable fields")
        for form_field in keyed:
            target[form_field.key] = field_value(form_field)
        return self._mutated(document)

    def _mutated(self, document: Any) -> PatchResult:
        text = self._config.dumps(document)
        return PatchResult(text=text, outcome=PatchOutcome.MUTATED)

    def _unchanged(
        self, original_text: str, path: tuple[Segment, ...], reason: str
    ) -> PatchResult:
        logger.debug("patch at %r left the document unchanged: %s", list(path), reason)
        return PatchResult(text=original_text, outcome=PatchOutcome.UNCHANGED, reason=reason)
