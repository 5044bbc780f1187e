"""Hash-chained log of verification verdicts.

Every verdict the service hands out is appended together with a digest
of the claim it was about.  Each entry commits to the previous entry's
hash, so rewriting or dropping a past verdict breaks the chain.
Entries live in memory only.
"""

from __future__ import annotations

import hashlib
import json
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from freivalds.config import AUDIT_GENESIS_HASH


def _canonical(obj: Any) -> bytes:
    return json.dumps(obj, sort_keys=True, separators=(",", ":")).encode()


def claim_digest(a: List[List[int]], b: List[List[int]], c: List[List[int]]) -> str:
    """SHA-256 over the canonical JSON of a claim (A, B, C)."""
    return hashlib.sha256(_canonical({"a": a, "b": b, "c": c})).hexdigest()


@dataclass
class VerdictEntry:
    timestamp: float
    claim_digest: str
    dimension: int
    trials: int
    accepted: bool
    prev_hash: str
    entry_hash: str

    def body(self) -> Dict[str, Any]:
        d = asdict(self)
        del d["entry_hash"]
        return d


class AuditLog:
    """Append-only hash chain of verdicts."""

    def __init__(self) -> None:
        self._entries: List[VerdictEntry] = []
        self._head: str = AUDIT_GENESIS_HASH

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, digest: str, dimension: int, trials: int, accepted: bool) -> VerdictEntry:
        entry = VerdictEntry(
            timestamp=time.time(),
            claim_digest=digest,
            dimension=dimension,
            trials=trials,
            accepted=accepted,
            prev_hash=self._head,
            entry_hash="",
        )
        entry.entry_hash = hashlib.sha256(_canonical(entry.body())).hexdigest()
        self._entries.append(entry)
        self._head = entry.entry_hash
        return entry

    def entries(self) -> List[Dict[str, Any]]:
        return [asdict(e) for e in self._entries]

    def verify_chain(self) -> bool:
        """Recompute every link from the genesis hash."""
        prev = AUDIT_GENESIS_HASH
        for e in self._entries:
            if e.prev_hash != prev:
                return False
            if e.entry_hash != hashlib.sha256(_canonical(e.body())).hexdigest():
                return False
            prev = e.entry_hash
        return True
