"""Snapshot builders and fake readers shared by the tests."""

from typing import Iterable, List, Optional

from perfmon.exceptions import SnapshotUnavailableError
from perfmon.models.snapshot import CpuTimes, MemoryInfo, Snapshot, SystemInfo


def make_snapshot(timestamp: float = 1.0,
                  heap_used: int = 1000,
                  cpu_user: float = 0.5,
                  cpu_system: float = 0.25,
                  load_1: float = 0.1,
                  cpu_count: int = 4) -> Snapshot:
    return Snapshot(
        timestamp=timestamp,
        memory=MemoryInfo(rss=heap_used * 2, heap_total=heap_used * 4, heap_used=heap_used, external=0),
        cpu=CpuTimes(user=cpu_user, system=cpu_system),
        system=SystemInfo(
            load_1=load_1,
            load_5=load_1,
            load_15=load_1,
            free_memory=1024,
            total_memory=4096,
            uptime=100.0,
            cpu_count=cpu_count,
        ),
    )


def history_of(heap_values: Iterable[int], **kwargs) -> List[Snapshot]:
    return [make_snapshot(timestamp=float(i + 1), heap_used=v, **kwargs)
            for i, v in enumerate(heap_values)]


class ScriptedReader:
    """Reader returning prepared snapshots in order; None entries simulate failed reads."""

    def __init__(self, snapshots: Iterable[Optional[Snapshot]]):
        self._snapshots = list(snapshots)
        self.calls = 0

    def capture(self) -> Snapshot:
        self.calls += 1
        if not self._snapshots:
            raise SnapshotUnavailableError("script exhausted")
        snapshot = self._snapshots.pop(0)
        if snapshot is None:
            raise SnapshotUnavailableError("scripted failure")
        return snapshot


class CountingReader:
    """Reader producing an endless increasing-timestamp series."""

    def __init__(self):
        self.calls = 0

    def capture(self) -> Snapshot:
        self.calls += 1
        return make_snapshot(timestamp=float(self.calls), heap_used=1000)
