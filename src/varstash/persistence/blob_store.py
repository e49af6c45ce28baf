"""One blob file per entry name inside the store directory."""

from __future__ import annotations

import logging
from pathlib import Path

from varstash.exceptions import InvalidEntryName, MissingBlob, PersistenceError
from varstash.protocols import ITrash

log = logging.getLogger(__name__)

_FORBIDDEN_IN_NAME = ("/", "\\", "\x00")


class BlobStore:
    """Reads, writes and soft-deletes ``<name><extension>`` files.

    The store directory is created lazily on the first write.
    """

    def __init__(self, base_path: Path, trash: ITrash, extension: str = ".pkl") -> None:
        self._base = base_path
        self._trash = trash
        self._ext = extension

    @property
    def base_path(self) -> Path:
        return self._base

    def blob_path(self, name: str) -> Path:
        if not name or name in (".", "..") or any(c in name for c in _FORBIDDEN_IN_NAME):
            raise InvalidEntryName(f"Entry name {name!r} cannot be stored as a file")
        return self._base / f"{name}{self._ext}"

    def write(self, name: str, payload: bytes) -> Path:
        path = self.blob_path(name)
        try:
            self._base.mkdir(parents=True, exist_ok=True)
            path.write_bytes(payload)
        except OSError as exc:
            raise PersistenceError(f"Failed to write blob for {name!r} to {path}: {exc}") from exc
        log.debug("Wrote %d bytes for %s to %s", len(payload), name, path)
        return path

    def read(self, name: str) -> bytes:
        path = self.blob_path(name)
        if not path.is_file():
            raise MissingBlob(name, path)
        return path.read_bytes()

    def exists(self, name: str) -> bool:
        return self.blob_path(name).is_file()

    def soft_delete(self, name: str) -> bool:
        """Hand the blob to the trash. Returns False (with a warning) if it was already gone."""
        path = self.blob_path(name)
        if not path.is_file():
            log.warning("Attempted to delete non-existent blob for %s: %s", name, path)
            return False
        try:
            self._trash.soft_delete(path)
        except OSError as exc:
            raise PersistenceError(f"Failed to soft-delete blob for {name!r} at {path}: {exc}") from exc
        return True

    def list_names(self) -> list[str]:
        """Entry names that have a blob file on disk, sorted."""
        if not self._base.is_dir():
            return []
        names = []
        for path in self._base.glob(f"*{self._ext}"):
            if path.is_file():
                names.append(path.name[: -len(self._ext)])
        return sorted(names)
