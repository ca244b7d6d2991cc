from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Set, Tuple


@dataclass(frozen=True)
class LogoHashRecord:
    hash: str
    brand_name: str
    algorithm: str
    variant: int
    quality_score: int
    created_at: float = field(default_factory=time.time)


class HashDedupStore:
    """In-process registry of accepted logo hashes.

    Appends are serialized through ``lock`` (a fresh ``threading.Lock`` when the
    caller supplies none). Membership checks read a set without locking; a check
    racing an append may miss the newest entry, which only costs a duplicate.
    """

    def __init__(self, lock: Optional[Any] = None):
        self._lock = lock if lock is not None else threading.Lock()
        self._records: list[LogoHashRecord] = []
        self._hashes: Set[str] = set()

    def record(self, entry: LogoHashRecord) -> None:
        with self._lock:
            self._records.append(entry)
            self._hashes.add(entry.hash)

    def contains(self, logo_hash: str) -> bool:
        return logo_hash in self._hashes

    def records(self) -> Tuple[LogoHashRecord, ...]:
        with self._lock:
            return tuple(self._records)

    def by_algorithm(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for rec in self.records():
            counts[rec.algorithm] = counts.get(rec.algorithm, 0) + 1
        return counts

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, logo_hash: object) -> bool:
        return isinstance(logo_hash, str) and self.contains(logo_hash)


__all__ = ["LogoHashRecord", "HashDedupStore"]
