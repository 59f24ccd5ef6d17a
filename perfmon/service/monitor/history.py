import threading
from collections import deque
from typing import Deque, List, Optional

from perfmon.models.snapshot import Snapshot

DEFAULT_HISTORY_SIZE = 3600


class History:
    """
    Append-only ring buffer of snapshots.

    Holds at most `max_size` snapshots; the oldest is evicted when full.
    Appends and reads share one lock so the sampling thread and report
    readers never see a half-updated buffer.
    """

    def __init__(self, max_size: int = DEFAULT_HISTORY_SIZE):
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self._snapshots: Deque[Snapshot] = deque(maxlen=max_size)
        self._lock = threading.Lock()

    def append(self, snapshot: Snapshot) -> None:
        with self._lock:
            if self._snapshots and snapshot.timestamp <= self._snapshots[-1].timestamp:
                raise ValueError(
                    f"Snapshot timestamp {snapshot.timestamp} is not after "
                    f"{self._snapshots[-1].timestamp}"
                )
            self._snapshots.append(snapshot)

    def snapshots(self) -> List[Snapshot]:
        with self._lock:
            return list(self._snapshots)

    def latest(self) -> Optional[Snapshot]:
        with self._lock:
            return self._snapshots[-1] if self._snapshots else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._snapshots)
