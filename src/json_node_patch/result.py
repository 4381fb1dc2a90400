"""PatchResult dataclass for patch-cycle output.

This module provides the tagged result returned by ``apply_edits()``:
the new document text plus whether anything actually changed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["PatchOutcome", "PatchResult"]


class PatchOutcome(StrEnum):
    """What a successful patch cycle did to the document.

    - MUTATED:   edits were written and the document was re-serialized.
    - UNCHANGED: nothing was written; the original text is returned as-is.
    """

    MUTATED = auto()
    UNCHANGED = auto()


@dataclass(frozen=True, slots=True)
class PatchResult:
    """Result of one patch cycle.

    Attributes:
        text:    Document text to commit.  For UNCHANGED this is the input
                 text verbatim.
        outcome: MUTATED or UNCHANGED.
        reason:  Why nothing changed (e.g. ``"unresolved path"``); None for
                 MUTATED.
    """

    text: str
    outcome: PatchOutcome
    reason: str | None = None

    @property
    def changed(self) -> bool:
        return self.outcome == PatchOutcome.MUTATED
