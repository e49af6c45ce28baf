"""Startup validation: fail-fast on store layouts that would corrupt a store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from varstash.config import StashSettings

log = logging.getLogger(__name__)


def validate_settings(settings: StashSettings) -> None:
    """Validate store settings. Raises ValueError on fatal misconfig."""
    _check_blob_extension(settings)
    _check_metadata_filename(settings)
    _check_trash_dirname(settings)


def _check_blob_extension(settings: StashSettings) -> None:
    ext = settings.blob_extension
    if len(ext) < 2 or not ext.startswith(".") or "/" in ext or "\\" in ext:
        raise ValueError(
            f"VARSTASH_BLOB_EXTENSION must look like '.pkl', got {ext!r}."
        )


def _check_metadata_filename(settings: StashSettings) -> None:
    """The metadata record must never be mistaken for a blob."""
    name = settings.metadata_filename
    if not name or "/" in name or "\\" in name:
        raise ValueError(f"VARSTASH_METADATA_FILENAME must be a plain file name, got {name!r}.")
    if name.endswith(settings.blob_extension):
        raise ValueError(
            f"VARSTASH_METADATA_FILENAME {name!r} ends with the blob extension "
            f"{settings.blob_extension!r}; it would be listed as a stored entry."
        )


def _check_trash_dirname(settings: StashSettings) -> None:
    name = settings.trash_dirname
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise ValueError(f"VARSTASH_TRASH_DIRNAME must be a plain directory name, got {name!r}.")
    if not name.startswith("."):
        log.warning(
            "VARSTASH_TRASH_DIRNAME=%s is not hidden; soft-deleted blobs will show up "
            "next to the live store.",
            name,
        )
