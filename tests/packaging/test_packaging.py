"""Packaging correctness verification for json-node-patch.

Tests validate:
- Top-level import exposes the documented public API
- py.typed marker ships with the package
- Installed metadata matches the package version

These tests inspect the source tree and the current installation rather than
building a wheel.
"""

from __future__ import annotations

from importlib import metadata
from pathlib import Path

import pytest

import json_node_patch

PACKAGE_DIR = Path(json_node_patch.__file__).parent


class TestPublicApi:
    """Verify the documented API is importable from the top-level package."""

    def test_all_exports(self) -> None:
        expected = {
            "ContainerNode",
            "DocumentStore",
            "EditSession",
            "EditorConfig",
            "FileDocumentStore",
            "FormField",
            "InMemoryDocumentStore",
            "InvalidDocumentError",
            "NodeRow",
            "NodeSelection",
            "PatchApplicator",
            "PatchError",
            "PatchOutcome",
            "PatchResult",
            "RowKind",
            "ScalarNode",
            "UnresolvedPathError",
            "apply_edits",
            "coerce",
            "format_path",
            "normalize",
            "render_rows",
            "resolve",
            "select",
        }
        actual = set(json_node_patch.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )


class TestPackageFiles:
    """Verify marker files and subpackages are present."""

    def test_py_typed_present(self) -> None:
        assert (PACKAGE_DIR / "py.typed").is_file()

    @pytest.mark.parametrize("subpackage", ["rows", "paths", "patch"])
    def test_subpackages_present(self, subpackage: str) -> None:
        assert (PACKAGE_DIR / subpackage / "__init__.py").is_file()


class TestPackageMetadata:
    """Verify installed metadata when the distribution is installed."""

    def test_version(self) -> None:
        try:
            installed = metadata.version("json-node-patch")
        except metadata.PackageNotFoundError:
            pytest.skip("json-node-patch is not installed")
        assert installed == json_node_patch.__version__
