"""Namespace sinks that loaded entries are bound into."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any


class DictNamespace:
    """Binds into a mutable mapping, e.g. a module's ``globals()`` or a plain dict."""

    def __init__(self, target: MutableMapping[str, Any] | None = None) -> None:
        self.target: MutableMapping[str, Any] = {} if target is None else target

    def bind(self, identifier: str, value: Any) -> None:
        self.target[identifier] = value
