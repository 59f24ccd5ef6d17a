"""Snapshot data models: one point-in-time capture of process and host metrics."""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict


def _check_non_negative(record) -> None:
    for f in fields(record):
        value = getattr(record, f.name)
        if value < 0:
            raise ValueError(f"{type(record).__name__}.{f.name} must be non-negative, got {value}")


@dataclass(frozen=True)
class MemoryInfo:
    """Process memory usage in bytes"""
    rss: int
    heap_total: int
    heap_used: int
    external: int

    def __post_init__(self):
        _check_non_negative(self)


@dataclass(frozen=True)
class CpuTimes:
    """Cumulative CPU time in seconds since process start"""
    user: float
    system: float

    def __post_init__(self):
        _check_non_negative(self)

    @property
    def total(self) -> float:
        return self.user + self.system


@dataclass(frozen=True)
class SystemInfo:
    """Host-wide load and memory figures"""
    load_1: float
    load_5: float
    load_15: float
    free_memory: int
    total_memory: int
    uptime: float
    cpu_count: int

    def __post_init__(self):
        _check_non_negative(self)


@dataclass(frozen=True)
class Snapshot:
    """
    Single resource usage snapshot.

    `timestamp` is monotonic-clock seconds and orders snapshots; the history
    that owns a snapshot enforces that it strictly increases. `wall_time` is
    the epoch time of the capture, for display only.
    """
    timestamp: float
    memory: MemoryInfo
    cpu: CpuTimes
    system: SystemInfo
    wall_time: float = 0.0

    def __post_init__(self):
        for name in ("timestamp", "wall_time"):
            if getattr(self, name) < 0:
                raise ValueError(f"Snapshot.{name} must be non-negative, got {getattr(self, name)}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Snapshot':
        """Create Snapshot from dictionary."""
        return cls(
            timestamp=data["timestamp"],
            memory=MemoryInfo(**data["memory"]),
            cpu=CpuTimes(**data["cpu"]),
            system=SystemInfo(**data["system"]),
            wall_time=data.get("wall_time", 0.0),
        )
