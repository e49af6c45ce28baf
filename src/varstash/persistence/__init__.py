"""Store backends: metadata record, blob files and the trash directory."""

from __future__ import annotations

from varstash.persistence.blob_store import BlobStore
from varstash.persistence.metadata_store import MetadataStore
from varstash.persistence.trash import DirectoryTrash

__all__ = ["BlobStore", "MetadataStore", "DirectoryTrash"]
