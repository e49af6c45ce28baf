"""Default predicate for value kinds that can never be persisted."""

from __future__ import annotations

import io
import socket
import threading
import types
from typing import Any

_LOCK_TYPES = (type(threading.Lock()), type(threading.RLock()))

# Live runtime handles: pickling them fails or produces a meaningless snapshot
_NON_PERSISTABLE_TYPES: tuple[type, ...] = (
    types.ModuleType,
    types.GeneratorType,
    types.AsyncGeneratorType,
    types.CoroutineType,
    types.FrameType,
    types.TracebackType,
    io.IOBase,
    socket.socket,
    threading.Thread,
    threading.Condition,
    threading.Event,
    *_LOCK_TYPES,
)


def is_non_persistable(value: Any) -> bool:
    """Return True for live handles (modules, generators, open files, locks, ...)."""
    return isinstance(value, _NON_PERSISTABLE_TYPES)
