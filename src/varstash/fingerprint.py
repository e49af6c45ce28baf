"""Content fingerprinting: serialize a value, then hash the bytes."""

from __future__ import annotations

import logging
import pickle
from typing import Any

import xxhash

from varstash.exceptions import FingerprintError, SerializationError
from varstash.protocols import IHasher, ISerializer

log = logging.getLogger(__name__)


class PickleSerializer:
    """``pickle`` with a pinned protocol so equal values give equal bytes."""

    def __init__(self, protocol: int = 5) -> None:
        self._protocol = protocol

    def serialize(self, value: Any) -> bytes:
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except Exception as exc:  # noqa: BLE001 - __reduce__ hooks raise arbitrary errors
            raise SerializationError(
                f"Cannot serialize value of type {type(value).__name__}: {exc}"
            ) from exc

    def deserialize(self, payload: bytes) -> Any:
        try:
            return pickle.loads(payload)
        except Exception as exc:  # noqa: BLE001 - __setstate__ hooks raise arbitrary errors
            raise SerializationError(f"Cannot deserialize payload: {exc}") from exc


class XXHasher:
    """xxHash64 over raw bytes."""

    def __init__(self, seed: int = 0) -> None:
        self._seed = seed

    def hash64(self, payload: bytes) -> int:
        return xxhash.xxh64_intdigest(payload, seed=self._seed)


class ContentFingerprinter:
    """Turns a value into a 64-bit digest of its serialized bytes.

    Two values with the same byte representation always share a digest.
    Distinct contents colliding in the 64-bit space is an accepted risk.
    """

    def __init__(self, serializer: ISerializer, hasher: IHasher) -> None:
        self._serializer = serializer
        self._hasher = hasher

    def fingerprint(self, value: Any) -> int:
        """Return the digest of ``value``. Raises FingerprintError."""
        return self.digest_payload(value)[1]

    def digest_payload(self, value: Any) -> tuple[bytes, int]:
        """Return ``(payload, digest)`` so callers serialize only once."""
        try:
            payload = self._serializer.serialize(value)
        except SerializationError as exc:
            raise FingerprintError(str(exc)) from exc
        digest = self._hasher.hash64(payload)
        log.debug("Fingerprinted %d bytes -> %016x", len(payload), digest)
        return payload, digest
