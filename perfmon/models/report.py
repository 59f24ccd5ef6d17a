"""Report data models."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List
import json

from perfmon.consts.TrendType import TrendType


@dataclass(frozen=True)
class MemoryStats:
    """Heap-used statistics over the whole history, in bytes"""
    min: float
    max: float
    average: float
    current: float
    growth: float


@dataclass(frozen=True)
class CpuStats:
    """Statistics of cumulative user + system CPU seconds"""
    min: float
    max: float
    average: float


@dataclass(frozen=True)
class MonitorReport:
    """
    Summary of a monitoring session.

    Derived from the history on demand; two reports built from the same
    history compare equal and serialize identically.
    """
    duration: float
    sample_count: int
    memory: MemoryStats
    cpu: CpuStats
    trend: TrendType

    @property
    def has_data(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'duration': self.duration,
            'sample_count': self.sample_count,
            'memory': asdict(self.memory),
            'cpu': asdict(self.cpu),
            'trend': self.trend.value,
        }

    def save_to_file(self, file_path: str) -> None:
        """Save report to JSON file."""
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)

    def format_rows(self) -> List[List[str]]:
        """Rows for tabular display: metric, min, max, average, extra."""
        mb = 1024 * 1024
        return [
            ["Heap used (MB)",
             f"{self.memory.min / mb:.2f}",
             f"{self.memory.max / mb:.2f}",
             f"{self.memory.average / mb:.2f}",
             f"current={self.memory.current / mb:.2f} growth={self.memory.growth / mb:+.2f}"],
            ["CPU time (s)",
             f"{self.cpu.min:.3f}",
             f"{self.cpu.max:.3f}",
             f"{self.cpu.average:.3f}",
             ""],
        ]


@dataclass(frozen=True)
class NoDataReport:
    """Returned when a report is requested before any snapshot exists"""
    message: str = "no data"

    @property
    def has_data(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {'error': self.message}
