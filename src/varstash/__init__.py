"""varstash: content-addressed incremental persistence for named Python values.

::

    from varstash import VariableStore

    store = VariableStore("session_vars")
    store.save_entries({"a": [1, 2, 3], "b": "x"})
    store.load_all_entries(globals())
"""

from __future__ import annotations

from varstash.config import StashSettings
from varstash.exceptions import (
    FingerprintError,
    InvalidEntryName,
    InvalidPathError,
    MetadataCorruption,
    MissingBlob,
    NonPersistableValue,
    PersistenceError,
    SerializationError,
    VarStashError,
)
from varstash.fingerprint import ContentFingerprinter, PickleSerializer, XXHasher
from varstash.models import DriftReport, LoadReport, SaveReport
from varstash.namespace import DictNamespace
from varstash.persistable import is_non_persistable
from varstash.sanitize import sanitize_name
from varstash.store import VariableStore

__all__ = [
    "VariableStore",
    "StashSettings",
    "SaveReport",
    "LoadReport",
    "DriftReport",
    "ContentFingerprinter",
    "PickleSerializer",
    "XXHasher",
    "DictNamespace",
    "is_non_persistable",
    "sanitize_name",
    "VarStashError",
    "InvalidPathError",
    "MetadataCorruption",
    "PersistenceError",
    "MissingBlob",
    "SerializationError",
    "FingerprintError",
    "NonPersistableValue",
    "InvalidEntryName",
]
