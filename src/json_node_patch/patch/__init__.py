"""Patch subpackage: value coercion and the patch applicator."""

from json_node_patch.patch.applicator import PatchApplicator, field_value
from json_node_patch.patch.coercer import coerce

__all__ = ["PatchApplicator", "coerce", "field_value"]
