"""Metadata record persistence: the ordered name -> digest mapping."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from varstash.exceptions import MetadataCorruption, PersistenceError
from varstash.models import EntrySet, MetadataRecord

log = logging.getLogger(__name__)


class MetadataStore:
    """Loads and saves the whole entry set as a single JSON record."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> EntrySet:
        """Return the stored entry set; empty if no record exists yet.

        Only ``names`` and ``digests`` are read from the record. Anything
        unparseable raises MetadataCorruption instead of yielding partial data.
        """
        if not self._path.is_file():
            return {}
        try:
            raw = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise MetadataCorruption(f"Failed to read metadata record {self._path}: {exc}") from exc
        try:
            # ValidationError and JSONDecodeError are both ValueErrors
            record = MetadataRecord.model_validate(json.loads(raw))
        except ValueError as exc:
            raise MetadataCorruption(
                f"Metadata record {self._path} is corrupted or not a varstash record: {exc}"
            ) from exc
        return record.to_entries()

    def save(self, entries: EntrySet) -> None:
        """Replace the record with ``entries``. Raises PersistenceError."""
        data = json.dumps(MetadataRecord.from_entries(entries).model_dump())
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(data, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as exc:
            raise PersistenceError(
                f"Metadata save failed for {self._path}: {exc} (check directory permissions)"
            ) from exc
        log.debug("Saved metadata for %d entries to %s", len(entries), self._path)
