"""Paths subpackage: rendering and resolution of structural paths."""

from json_node_patch.paths.formatter import format_path
from json_node_patch.paths.resolver import Resolution, assign, resolve, walk

__all__ = ["Resolution", "assign", "format_path", "resolve", "walk"]
