"""Data models: the persisted metadata record and per-operation reports."""

from __future__ import annotations

import dataclasses
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Ordered name -> digest mapping; dict insertion order is the stored order
EntrySet = dict[str, int]

Digest = Annotated[int, Field(ge=0, le=2**64 - 1)]


class MetadataRecord(BaseModel):
    """On-disk shape of the entry set: two parallel, index-aligned lists.

    Unknown keys in the record are ignored and never interpreted.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    names: list[str]
    digests: list[Digest]

    @model_validator(mode="after")
    def _check_alignment(self) -> MetadataRecord:
        if len(self.names) != len(self.digests):
            raise ValueError(
                f"names ({len(self.names)}) and digests ({len(self.digests)}) differ in length"
            )
        if len(set(self.names)) != len(self.names):
            raise ValueError("names contain duplicates")
        return self

    @classmethod
    def from_entries(cls, entries: EntrySet) -> MetadataRecord:
        return cls(names=list(entries), digests=list(entries.values()))

    def to_entries(self) -> EntrySet:
        return dict(zip(self.names, self.digests))


@dataclasses.dataclass
class SaveReport:
    """Outcome of one ``save_entries`` call."""

    inserted: list[str] = dataclasses.field(default_factory=list)
    updated: list[str] = dataclasses.field(default_factory=list)
    unchanged: list[str] = dataclasses.field(default_factory=list)
    deleted: list[str] = dataclasses.field(default_factory=list)
    # name -> reason the entry was left alone
    skipped: dict[str, str] = dataclasses.field(default_factory=dict)
    # names listed in metadata whose blob was already gone at delete time
    missing_blobs: list[str] = dataclasses.field(default_factory=list)

    @property
    def blob_writes(self) -> int:
        return len(self.inserted) + len(self.updated)

    def summary(self) -> str:
        return (
            f"inserted={len(self.inserted)} updated={len(self.updated)} "
            f"unchanged={len(self.unchanged)} deleted={len(self.deleted)} "
            f"skipped={len(self.skipped)}"
        )


@dataclasses.dataclass
class LoadReport:
    """Outcome of one ``load_all_entries`` call."""

    # stored name -> identifier it was bound under
    loaded: dict[str, str] = dataclasses.field(default_factory=dict)
    # stored name -> reason it was not bound
    failed: dict[str, str] = dataclasses.field(default_factory=dict)

    def summary(self) -> str:
        return f"loaded={len(self.loaded)} failed={len(self.failed)}"


@dataclasses.dataclass(frozen=True)
class DriftReport:
    """Divergence between the metadata record and blob files on disk."""

    missing: tuple[str, ...] = ()
    orphaned: tuple[str, ...] = ()

    @property
    def is_clean(self) -> bool:
        return not self.missing and not self.orphaned
