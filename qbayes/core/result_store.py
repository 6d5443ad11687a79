"""
QBayes Module: result_store.py
Bounded, insertion-ordered history of computed results.

Entries are keyed by ``f"{type}_{timestamp}"`` with a millisecond ISO-8601
UTC timestamp. When the store grows past its capacity the oldest entry is
evicted (strict FIFO, regardless of type). Two stores of the same type in
the same millisecond share an identifier: the later one overwrites the
earlier in place.
"""

from __future__ import annotations

import copy
import threading
from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

import pandas as pd

from qbayes.core.config import STORE_CAPACITY
from qbayes.core.errors import ConfigError
from qbayes.logging_utils import qstep, qwarn


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond resolution, e.g. 2026-10-18T09:15:02.123Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class StoredResult:
    identifier: str
    type: str
    result: Any
    timestamp: str

    def to_dict(self) -> Dict:
        result = self.result.to_dict() if hasattr(self.result, "to_dict") else self.result
        return {
            "identifier": self.identifier,
            "type": self.type,
            "result": result,
            "timestamp": self.timestamp,
        }


class ResultStore:
    """
    FIFO-bounded result cache.

    Parameters
    ----------
    capacity : int
        Maximum number of entries kept (default 100).
    clock : callable, optional
        Zero-argument callable returning the timestamp string. Defaults to
        :func:`utc_timestamp`; tests inject a deterministic one.
    """

    def __init__(self, capacity: int = STORE_CAPACITY, clock: Optional[Callable[[], str]] = None):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ConfigError(f"capacity must be a positive int, got {capacity!r}")
        self.capacity = capacity
        self._clock = clock or utc_timestamp
        self._entries: "OrderedDict[str, StoredResult]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def store(self, result_type: str, result: Any) -> str:
        """Store `result` under a generated identifier and return that identifier."""
        timestamp = self._clock()
        identifier = f"{result_type}_{timestamp}"
        entry = StoredResult(
            identifier=identifier,
            type=result_type,
            result=copy.deepcopy(result),
            timestamp=timestamp,
        )

        with self._lock:
            if identifier in self._entries:
                qwarn(f"Result id collision on {identifier}; overwriting earlier entry")
            # assignment to an existing key keeps its position
            self._entries[identifier] = entry

            if len(self._entries) > self.capacity:
                evicted, _ = self._entries.popitem(last=False)
                qstep(f"Result store full ({self.capacity}); evicted {evicted}")

        return identifier

    def get(self, identifier: str) -> Optional[StoredResult]:
        with self._lock:
            entry = self._entries.get(identifier)
            return copy.deepcopy(entry) if entry is not None else None

    def query(self, result_type: Optional[str] = None) -> List[Tuple[str, StoredResult]]:
        """
        All entries in insertion order, optionally only those of `result_type`.

        Returned entries are copies; mutating them does not touch the store.
        """
        with self._lock:
            items = [
                (key, entry)
                for key, entry in self._entries.items()
                if result_type is None or entry.type == result_type
            ]
            return copy.deepcopy(items)

    def to_frame(self, result_type: Optional[str] = None) -> pd.DataFrame:
        """Tabular view of :meth:`query` with one row per entry."""
        rows = [entry.to_dict() for _, entry in self.query(result_type)]
        return pd.DataFrame(rows, columns=["identifier", "type", "timestamp", "result"])
