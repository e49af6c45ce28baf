"""Shared fixtures for varstash tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes.fake_namespace import RecordingSink
from tests.fakes.fake_trash import RecordingTrash
from varstash.config import StashSettings
from varstash.store import VariableStore


@pytest.fixture
def settings() -> StashSettings:
    """Default settings, independent of any VARSTASH_* env vars on the machine."""
    return StashSettings(
        store_path="varstash_data",
        root=None,
        metadata_filename="datainfo__.json",
        blob_extension=".pkl",
        trash_dirname=".trash",
        pickle_protocol=5,
        hash_seed=0,
        log_level="INFO",
    )


@pytest.fixture
def store(tmp_path: Path, settings: StashSettings) -> VariableStore:
    """Store under a temp root using the real directory trash."""
    return VariableStore("vars", root=tmp_path, settings=settings)


@pytest.fixture
def trash() -> RecordingTrash:
    return RecordingTrash()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
