"""Public entry point: a named directory of incrementally saved values."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any

from varstash.config import StashSettings
from varstash.exceptions import InvalidPathError
from varstash.fingerprint import ContentFingerprinter, PickleSerializer, XXHasher
from varstash.models import DriftReport, LoadReport, SaveReport
from varstash.namespace import DictNamespace
from varstash.persistable import is_non_persistable as default_is_non_persistable
from varstash.persistence.blob_store import BlobStore
from varstash.persistence.metadata_store import MetadataStore
from varstash.persistence.trash import DirectoryTrash
from varstash.protocols import IHasher, INamespaceSink, ISerializer, ITrash, PersistablePredicate
from varstash.services.loader import LoadProtocol
from varstash.services.reconciliation import ReconciliationEngine
from varstash.startup_checks import validate_settings

log = logging.getLogger(__name__)

RESERVED_PATH_CHARS = '/\\*:?"<>|'
_RESERVED_RE = re.compile(r'[/\\*:?"<>|]')


class VariableStore:
    """Saves a mapping of named values, writing each distinct content only once.

    Usage::

        store = VariableStore("session_vars")
        store.save_entries({"weights": weights, "labels": labels})
        store.load_all_entries(globals())
        store.list_stored_names()

    Each value is kept as ``<name>.pkl`` inside ``root / store_path`` next to a
    ``datainfo__.json`` record of names and content digests. Saving again with
    unchanged content writes nothing but the record; names missing from a save
    are moved to the store's ``.trash`` directory, not the host recycle bin.
    Recovering one is a manual move of ``<name>.<timestamp>.pkl`` back into
    the store as ``<name>.pkl``; pass a different ``trash`` to change this.

    The store is single-writer: concurrent saves to one directory race.
    """

    def __init__(
        self,
        store_path: str | None = None,
        *,
        root: Path | str | None = None,
        settings: StashSettings | None = None,
        serializer: ISerializer | None = None,
        hasher: IHasher | None = None,
        trash: ITrash | None = None,
        is_non_persistable: PersistablePredicate | None = None,
    ) -> None:
        self._settings = settings or StashSettings()
        validate_settings(self._settings)

        self._store_path = self._settings.store_path if store_path is None else store_path
        if _RESERVED_RE.search(self._store_path):
            raise InvalidPathError(
                f"Invalid storage path {self._store_path!r}: path cannot contain any of "
                f"{RESERVED_PATH_CHARS}"
            )

        base_root = root if root is not None else self._settings.root
        self._working_path = Path(base_root if base_root is not None else Path.cwd()) / self._store_path

        self._serializer = serializer or PickleSerializer(self._settings.pickle_protocol)
        self._trash = trash or DirectoryTrash(self._working_path / self._settings.trash_dirname)
        self._metadata = MetadataStore(self._working_path / self._settings.metadata_filename)
        self._blobs = BlobStore(self._working_path, self._trash, self._settings.blob_extension)
        self._engine = ReconciliationEngine(
            self._metadata,
            self._blobs,
            ContentFingerprinter(self._serializer, hasher or XXHasher(self._settings.hash_seed)),
            is_non_persistable or default_is_non_persistable,
        )
        self._loader = LoadProtocol(self._metadata, self._blobs, self._serializer)

    @property
    def working_path(self) -> Path:
        return self._working_path

    @property
    def varnames(self) -> list[str]:
        return self.list_stored_names()

    def save_entries(self, entries: Mapping[str, Any]) -> SaveReport:
        """Make the store hold exactly ``entries`` (minus entries that had to be skipped)."""
        if not isinstance(entries, Mapping):
            raise TypeError(f"entries must be a mapping of name -> value, got {type(entries).__name__}")
        return self._engine.reconcile(entries)

    def load_all_entries(self, sink: INamespaceSink | MutableMapping[str, Any]) -> LoadReport:
        """Bind every stored value into ``sink`` under a sanitized identifier."""
        if isinstance(sink, MutableMapping):
            sink = DictNamespace(sink)
        return self._loader.load_all(sink)

    def list_stored_names(self) -> list[str]:
        return list(self._metadata.load())

    def stored_digests(self) -> dict[str, int]:
        return self._metadata.load()

    def check_drift(self) -> DriftReport:
        """Compare the metadata record against blob files actually on disk."""
        listed = self._metadata.load()
        on_disk = set(self._blobs.list_names())
        report = DriftReport(
            missing=tuple(name for name in listed if name not in on_disk),
            orphaned=tuple(sorted(on_disk.difference(listed))),
        )
        if not report.is_clean:
            log.warning(
                "Store %s has drifted: %d missing blob(s), %d orphaned blob(s)",
                self._working_path,
                len(report.missing),
                len(report.orphaned),
            )
        return report
