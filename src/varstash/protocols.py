"""Collaborator protocols: the capabilities the core consumes but does not own."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Protocol, runtime_checkable

# Predicate deciding whether a value can be persisted at all
PersistablePredicate = Callable[[Any], bool]


@runtime_checkable
class ISerializer(Protocol):
    """Protocol for value <-> bytes conversion."""

    def serialize(self, value: Any) -> bytes:
        """Return the canonical byte representation. Raises SerializationError."""
        ...

    def deserialize(self, payload: bytes) -> Any:
        """Rebuild a value from bytes produced by ``serialize``. Raises SerializationError."""
        ...


@runtime_checkable
class IHasher(Protocol):
    """Protocol for the 64-bit non-cryptographic hash oracle."""

    def hash64(self, payload: bytes) -> int:
        """Return an unsigned 64-bit digest of ``payload``."""
        ...


@runtime_checkable
class ITrash(Protocol):
    """Protocol for recoverable file removal."""

    def soft_delete(self, path: Path) -> None:
        """Remove ``path`` so that it can still be recovered. Raises OSError on failure."""
        ...


@runtime_checkable
class INamespaceSink(Protocol):
    """Protocol for the caller-visible namespace that loaded values are bound into."""

    def bind(self, identifier: str, value: Any) -> None:
        """Bind ``value`` under ``identifier``; a later bind of the same identifier wins."""
        ...
