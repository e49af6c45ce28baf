"""Tests for the metadata record and report models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from varstash.models import DriftReport, MetadataRecord, SaveReport


class TestMetadataRecord:
    def test_flatten_and_rebuild(self) -> None:
        entries = {"z": 3, "a": 1}
        record = MetadataRecord.from_entries(entries)
        assert record.names == ["z", "a"]
        assert record.digests == [3, 1]
        assert record.to_entries() == entries

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValidationError, match="differ in length"):
            MetadataRecord(names=["a"], digests=[])

    def test_duplicate_names(self) -> None:
        with pytest.raises(ValidationError, match="duplicates"):
            MetadataRecord(names=["a", "a"], digests=[1, 2])

    def test_extra_keys_dropped(self) -> None:
        record = MetadataRecord.model_validate({"names": [], "digests": [], "other": 1})
        assert record.model_dump() == {"names": [], "digests": []}


class TestReports:
    def test_save_report_counts(self) -> None:
        report = SaveReport(inserted=["a"], updated=["b"], unchanged=["c"], skipped={"d": "x"})
        assert report.blob_writes == 2
        assert report.summary() == "inserted=1 updated=1 unchanged=1 deleted=0 skipped=1"

    def test_drift_report_clean(self) -> None:
        assert DriftReport().is_clean
        assert not DriftReport(orphaned=("x",)).is_clean
