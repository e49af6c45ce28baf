"""Load protocol: bind every stored entry into a caller namespace."""

from __future__ import annotations

import logging

from varstash.exceptions import MissingBlob, SerializationError
from varstash.models import LoadReport
from varstash.persistence.blob_store import BlobStore
from varstash.persistence.metadata_store import MetadataStore
from varstash.protocols import INamespaceSink, ISerializer
from varstash.sanitize import sanitize_name

log = logging.getLogger(__name__)


class LoadProtocol:
    """Restores stored entries one blob at a time, in stored order.

    A missing or unreadable blob, or a failing bind, is reported for that
    entry and loading continues with the next one.
    """

    def __init__(self, metadata: MetadataStore, blobs: BlobStore, serializer: ISerializer) -> None:
        self._metadata = metadata
        self._blobs = blobs
        self._serializer = serializer

    def load_all(self, sink: INamespaceSink) -> LoadReport:
        report = LoadReport()
        if not self._blobs.base_path.is_dir():
            log.warning("Storage directory does not exist: %s", self._blobs.base_path)
            return report

        stored = self._metadata.load()
        for name in stored:
            try:
                value = self._serializer.deserialize(self._blobs.read(name))
            except MissingBlob as exc:
                self._fail(report, name, f"missing blob: {exc}")
                continue
            except (SerializationError, OSError, ValueError) as exc:
                self._fail(report, name, f"failed to load: {exc}")
                continue

            identifier = sanitize_name(name)
            try:
                sink.bind(identifier, value)
            except Exception as exc:  # noqa: BLE001 - arbitrary sink implementations
                self._fail(report, name, f"failed to bind as {identifier}: {exc}")
                continue
            report.loaded[name] = identifier

        log.info("Loaded from %s: %s", self._blobs.base_path, report.summary())
        return report

    @staticmethod
    def _fail(report: LoadReport, name: str, reason: str) -> None:
        log.warning("Failed to load variable %s: %s", name, reason)
        report.failed[name] = reason
