"""Save and load services built on the persistence layer."""

from __future__ import annotations

from varstash.services.loader import LoadProtocol
from varstash.services.reconciliation import ReconciliationEngine

__all__ = ["LoadProtocol", "ReconciliationEngine"]
