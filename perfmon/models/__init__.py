"""Models for monitor data structures."""

from .anomaly_warning import AnomalyWarning
from .report import CpuStats, MemoryStats, MonitorReport, NoDataReport
from .snapshot import CpuTimes, MemoryInfo, Snapshot, SystemInfo

__all__ = [
    "AnomalyWarning",
    "CpuStats",
    "CpuTimes",
    "MemoryInfo",
    "MemoryStats",
    "MonitorReport",
    "NoDataReport",
    "Snapshot",
    "SystemInfo",
]
