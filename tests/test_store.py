"""Tests for the DocumentStore protocol and its implementations."""

from __future__ import annotations

from pathlib import Path

from json_node_patch.protocols import DocumentStore
from json_node_patch.store import FileDocumentStore, InMemoryDocumentStore


class TestProtocol:
    """Structural conformance, no inheritance required."""

    def test_builtin_stores_conform(self, tmp_path: Path) -> None:
        assert isinstance(InMemoryDocumentStore(), DocumentStore)
        assert isinstance(FileDocumentStore(tmp_path / "doc.json"), DocumentStore)

    def test_custom_store_conforms(self) -> None:
        class Buffer:
            def get_document_text(self) -> str | None:
                return "{}"

            def set_document_text(self, text: str) -> None:
                pass

        assert isinstance(Buffer(), DocumentStore)

    def test_object_without_methods_does_not_conform(self) -> None:
        assert not isinstance(object(), DocumentStore)


class TestInMemoryDocumentStore:
    def test_round_trip(self) -> None:
        store = InMemoryDocumentStore('{"a": 1}')
        assert store.get_document_text() == '{"a": 1}'
        store.set_document_text("[]")
        assert store.get_document_text() == "[]"
        assert store.writes == 1

    def test_empty_by_default(self) -> None:
        assert InMemoryDocumentStore().get_document_text() is None


class TestFileDocumentStore:
    def test_missing_file_reads_none(self, tmp_path: Path) -> None:
        assert FileDocumentStore(tmp_path / "nope.json").get_document_text() is None

    def test_write_then_read(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.json"
        store = FileDocumentStore(path)
        store.set_document_text('{\n  "city": "Zürich"\n}')
        assert path.read_text(encoding="utf-8") == '{\n  "city": "Zürich"\n}'
        assert store.get_document_text() == '{\n  "city": "Zürich"\n}'

    def test_replaces_existing_file_without_leftovers(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.json"
        path.write_text("{}", encoding="utf-8")
        FileDocumentStore(path).set_document_text("[1]")
        assert path.read_text(encoding="utf-8") == "[1]"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["doc.json"]
