from .history import History
from .metric_reader import MetricReader
from .sampling_monitor import SamplingHandle, SamplingMonitor

__all__ = ["History", "MetricReader", "SamplingHandle", "SamplingMonitor"]
