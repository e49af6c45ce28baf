"""Directory-backed trash: soft-deleted files are moved, never unlinked."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path

log = logging.getLogger(__name__)


class DirectoryTrash:
    """Moves files into a trash directory, suffixing them with a UTC timestamp.

    Restoring is a manual move back out of the directory.
    """

    def __init__(self, trash_dir: Path) -> None:
        self._dir = trash_dir

    @property
    def path(self) -> Path:
        return self._dir

    def _target(self, path: Path) -> Path:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        target = self._dir / f"{path.stem}.{stamp}{path.suffix}"
        counter = 1
        while target.exists():
            target = self._dir / f"{path.stem}.{stamp}-{counter}{path.suffix}"
            counter += 1
        return target

    def soft_delete(self, path: Path) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        target = self._target(path)
        os.replace(path, target)
        log.debug("Moved %s to trash as %s", path, target)

    def list_items(self) -> list[Path]:
        if not self._dir.is_dir():
            return []
        return sorted(p for p in self._dir.iterdir() if p.is_file())
