"""In-process sampling monitor: resource snapshots, anomaly warnings and trend reports."""

from perfmon.config import ConfigLoader, MonitorConfig
from perfmon.exceptions import ConfigError, MonitorStateError, PerfmonError, SnapshotUnavailableError
from perfmon.models import AnomalyWarning, MonitorReport, NoDataReport, Snapshot
from perfmon.service.detector import CpuLoadDetector, MemoryGrowthDetector
from perfmon.service.monitor import History, MetricReader, SamplingHandle, SamplingMonitor
from perfmon.service.report.report_generator import generate_report

__version__ = "0.1.0"

__all__ = [
    "AnomalyWarning",
    "ConfigError",
    "ConfigLoader",
    "CpuLoadDetector",
    "History",
    "MemoryGrowthDetector",
    "MetricReader",
    "MonitorConfig",
    "MonitorReport",
    "MonitorStateError",
    "NoDataReport",
    "PerfmonError",
    "SamplingHandle",
    "SamplingMonitor",
    "SnapshotUnavailableError",
    "Snapshot",
    "generate_report",
]
