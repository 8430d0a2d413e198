"""Size-bounded, file-backed log of past groupings.

The log is a JSON array, newest entry first. Reads are forgiving: a missing,
unreadable or malformed file is treated as an empty history. Writes are not:
any I/O failure propagates to the caller.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator

from team_mixer.history.schema import HistoryEntry, HistoryLog, history_from_payload, history_to_payload

logger = logging.getLogger(__name__)

_LOCKS: Dict[str, threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    key = os.path.abspath(path)
    with _LOCKS_GUARD:
        lock = _LOCKS.get(key)
        if lock is None:
            lock = threading.RLock()
            _LOCKS[key] = lock
        return lock


class HistoryStore:
    def __init__(self, path: str | Path, limit: int = 5):
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        self.path = Path(path)
        self.limit = limit
        self._lock = _lock_for(self.path)

    @contextmanager
    def locked(self) -> Iterator["HistoryStore"]:
        """
        Hold the store lock for a whole load -> compute -> append sequence.

        The lock is re-entrant and shared by every store on the same path in
        this process, so ``append`` may be called inside the block.
        """
        with self._lock:
            yield self

    def load(self) -> HistoryLog:
        if not self.path.exists():
            logger.debug("No history at %s, starting empty", self.path)
            return []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                payload = json.load(f)
            history = history_from_payload(payload)
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
            logger.warning("Ignoring unreadable history at %s: %s", self.path, exc)
            return []
        return history[: self.limit]

    def append(self, entry: HistoryEntry) -> HistoryLog:
        with self._lock:
            history = self.load()
            history.insert(0, entry)
            del history[self.limit :]
            self._write(history)
        logger.info("Recorded %d teams in %s (%d/%d entries)", len(entry.teams), self.path, len(history), self.limit)
        return history

    def clear(self) -> None:
        with self._lock:
            self._write([])

    def _write(self, history: HistoryLog) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(history_to_payload(history), f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
