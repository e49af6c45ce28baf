"""Namespace sink fakes for tests."""

from __future__ import annotations

from typing import Any


class RecordingSink:
    """Records every bind in order, including repeated identifiers."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def bind(self, identifier: str, value: Any) -> None:
        self.calls.append((identifier, value))

    @property
    def bound(self) -> dict[str, Any]:
        return dict(self.calls)


class RejectingSink(RecordingSink):
    """Refuses to bind selected identifiers."""

    def __init__(self, reject: set[str]) -> None:
        super().__init__()
        self._reject = reject

    def bind(self, identifier: str, value: Any) -> None:
        if identifier in self._reject:
            raise RuntimeError(f"{identifier} is read-only")
        super().bind(identifier, value)
