"""Reconciliation: align the stored entry set with a requested one.

One pass deletes names that are no longer requested, then inserts or updates
the requested names whose fingerprint changed, then rewrites the metadata
record once. Unchanged content is never re-written.

Per-entry problems (non-persistable values, fingerprint failures, unusable
names) are logged and recorded in the report; they never stop the batch.
A failed blob or metadata write aborts the save.

The metadata write is not atomic with the blob writes before it. A crash in
between leaves an orphaned blob or a stale digest; ``VariableStore.check_drift``
reports both.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from varstash.exceptions import FingerprintError, InvalidEntryName, NonPersistableValue
from varstash.fingerprint import ContentFingerprinter
from varstash.models import SaveReport
from varstash.persistence.blob_store import BlobStore
from varstash.persistence.metadata_store import MetadataStore
from varstash.protocols import PersistablePredicate

log = logging.getLogger(__name__)


class ReconciliationEngine:
    """Applies the minimal set of deletions, insertions and updates to a store."""

    def __init__(
        self,
        metadata: MetadataStore,
        blobs: BlobStore,
        fingerprinter: ContentFingerprinter,
        is_non_persistable: PersistablePredicate,
    ) -> None:
        self._metadata = metadata
        self._blobs = blobs
        self._fingerprinter = fingerprinter
        self._is_non_persistable = is_non_persistable

    def reconcile(self, requested: Mapping[str, Any]) -> SaveReport:
        report = SaveReport()
        stored = self._metadata.load()

        self._delete_unrequested(stored, requested, report)
        for name, value in requested.items():
            self._upsert(stored, name, value, report)

        self._metadata.save(stored)
        log.info("Reconciled %s: %s", self._blobs.base_path, report.summary())
        return report

    def _delete_unrequested(
        self, stored: dict[str, int], requested: Mapping[str, Any], report: SaveReport
    ) -> None:
        for name in reversed(list(stored)):
            if name in requested:
                continue
            try:
                removed = self._blobs.soft_delete(name)
            except InvalidEntryName as exc:
                # unreachable through save_entries; only a hand-edited record holds such names
                log.warning("Dropping unusable stored name %r: %s", name, exc)
                removed = False
            if not removed:
                report.missing_blobs.append(name)
            del stored[name]
            report.deleted.append(name)

    def _upsert(self, stored: dict[str, int], name: Any, value: Any, report: SaveReport) -> None:
        if not isinstance(name, str):
            self._skip(report, repr(name), f"entry names must be str, got {type(name).__name__}")
            return

        try:
            self._blobs.blob_path(name)
        except InvalidEntryName as exc:
            self._skip(report, name, str(exc))
            return

        try:
            payload, digest = self._digest(value)
        except NonPersistableValue as exc:
            self._skip(report, name, str(exc))
            return
        except FingerprintError as exc:
            self._skip(report, name, f"failed to calculate hash: {exc}")
            return

        previous = stored.get(name)
        if previous == digest:
            report.unchanged.append(name)
            return

        self._blobs.write(name, payload)

        stored[name] = digest
        if previous is None:
            report.inserted.append(name)
        else:
            report.updated.append(name)

    def _digest(self, value: Any) -> tuple[bytes, int]:
        if self._is_non_persistable(value):
            raise NonPersistableValue(f"unsavable value of type {type(value).__name__}")
        return self._fingerprinter.digest_payload(value)

    @staticmethod
    def _skip(report: SaveReport, name: str, reason: str) -> None:
        log.warning("Skipping %s: %s", name, reason)
        report.skipped[name] = reason
