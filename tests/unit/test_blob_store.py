"""Tests for BlobStore and DirectoryTrash."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests.fakes.fake_trash import BrokenTrash, RecordingTrash
from varstash.exceptions import InvalidEntryName, MissingBlob, PersistenceError
from varstash.persistence.blob_store import BlobStore
from varstash.persistence.trash import DirectoryTrash


@pytest.fixture
def blobs(tmp_path: Path, trash: RecordingTrash) -> BlobStore:
    return BlobStore(tmp_path / "vars", trash, ".pkl")


class TestBlobStoreReadWrite:
    def test_write_creates_store_directory(self, blobs: BlobStore) -> None:
        assert not blobs.base_path.exists()
        path = blobs.write("a", b"\x00\x01payload")
        assert path == blobs.base_path / "a.pkl"
        assert blobs.base_path.is_dir()

    def test_read_returns_exact_bytes(self, blobs: BlobStore) -> None:
        payload = bytes(range(256)) * 3
        blobs.write("data", payload)
        assert blobs.read("data") == payload

    def test_write_replaces_existing(self, blobs: BlobStore) -> None:
        blobs.write("a", b"old")
        blobs.write("a", b"new")
        assert blobs.read("a") == b"new"

    def test_read_missing_raises(self, blobs: BlobStore) -> None:
        with pytest.raises(MissingBlob) as exc_info:
            blobs.read("ghost")
        assert exc_info.value.name == "ghost"
        assert isinstance(exc_info.value, KeyError)

    def test_names_with_dots_keep_full_name(self, blobs: BlobStore) -> None:
        blobs.write("model.v2", b"x")
        assert blobs.exists("model.v2")
        assert blobs.list_names() == ["model.v2"]

    @pytest.mark.parametrize("name", ["", ".", "..", "a/b", "a\\b", "nul\x00byte"])
    def test_unusable_names_rejected(self, blobs: BlobStore, name: str) -> None:
        with pytest.raises(InvalidEntryName):
            blobs.write(name, b"x")

    def test_write_failure_raises_persistence_error(self, tmp_path: Path, trash: RecordingTrash) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("file")
        with pytest.raises(PersistenceError):
            BlobStore(blocker, trash).write("a", b"x")


class TestBlobStoreListing:
    def test_list_names_empty_when_no_directory(self, blobs: BlobStore) -> None:
        assert blobs.list_names() == []

    def test_list_names_ignores_other_files(self, blobs: BlobStore) -> None:
        blobs.write("b", b"1")
        blobs.write("a", b"2")
        (blobs.base_path / "datainfo__.json").write_text("{}")
        (blobs.base_path / ".trash").mkdir()
        (blobs.base_path / ".trash" / "old.pkl").write_bytes(b"3")
        assert blobs.list_names() == ["a", "b"]


class TestBlobStoreSoftDelete:
    def test_soft_delete_hands_blob_to_trash(self, blobs: BlobStore, trash: RecordingTrash) -> None:
        path = blobs.write("a", b"keep me")
        assert blobs.soft_delete("a") is True
        assert not path.exists()
        assert trash.items == {path: b"keep me"}

    def test_soft_delete_missing_warns(
        self, blobs: BlobStore, trash: RecordingTrash, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="varstash.persistence.blob_store"):
            assert blobs.soft_delete("ghost") is False
        assert "non-existent blob" in caplog.text
        assert trash.items == {}

    def test_trash_failure_raises(self, tmp_path: Path) -> None:
        blobs = BlobStore(tmp_path, BrokenTrash())
        blobs.write("a", b"x")
        with pytest.raises(PersistenceError):
            blobs.soft_delete("a")
        assert blobs.exists("a")


class TestDirectoryTrash:
    def test_moves_file_into_trash_dir(self, tmp_path: Path) -> None:
        trash = DirectoryTrash(tmp_path / ".trash")
        src = tmp_path / "a.pkl"
        src.write_bytes(b"content")
        trash.soft_delete(src)
        assert not src.exists()
        items = trash.list_items()
        assert len(items) == 1
        assert items[0].name.startswith("a.")
        assert items[0].suffix == ".pkl"
        assert items[0].read_bytes() == b"content"

    def test_repeated_deletes_of_same_name_are_all_kept(self, tmp_path: Path) -> None:
        trash = DirectoryTrash(tmp_path / ".trash")
        for content in (b"v1", b"v2", b"v3"):
            src = tmp_path / "a.pkl"
            src.write_bytes(content)
            trash.soft_delete(src)
        assert sorted(p.read_bytes() for p in trash.list_items()) == [b"v1", b"v2", b"v3"]

    def test_missing_source_raises_oserror(self, tmp_path: Path) -> None:
        trash = DirectoryTrash(tmp_path / ".trash")
        with pytest.raises(OSError):
            trash.soft_delete(tmp_path / "ghost.pkl")

    def test_list_items_without_directory(self, tmp_path: Path) -> None:
        assert DirectoryTrash(tmp_path / ".trash").list_items() == []
