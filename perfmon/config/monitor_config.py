"""
Monitor configuration data class.

Holds sampling, retention and detector settings and wires a monitor from them.
"""
import os
from dataclasses import dataclass
from numbers import Real
from pathlib import Path
from typing import Optional

from perfmon.exceptions import ConfigError
from perfmon.service.detector.cpu_load_detector import DEFAULT_LOAD_RATIO, CpuLoadDetector
from perfmon.service.detector.memory_growth_detector import (
    DEFAULT_INCREASE_RATIO,
    DEFAULT_WINDOW_SIZE,
    MemoryGrowthDetector,
)
from perfmon.service.monitor.history import DEFAULT_HISTORY_SIZE
from perfmon.service.monitor.metric_reader import MetricReader
from perfmon.service.monitor.sampling_monitor import SamplingMonitor


def _require(name: str, value, kind: type) -> None:
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ConfigError(f"{name} must be {'an integer' if kind is int else 'a number'}, got {value!r}")


@dataclass
class MonitorConfig:
    interval_ms: int = 1000
    history_size: int = DEFAULT_HISTORY_SIZE
    pid: Optional[int] = None
    trace_python_heap: bool = False
    memory_window: int = DEFAULT_WINDOW_SIZE
    memory_increase_ratio: float = DEFAULT_INCREASE_RATIO
    cpu_load_ratio: float = DEFAULT_LOAD_RATIO
    duration_seconds: float = 60
    output_file: Optional[str] = None
    log_file: Optional[str] = None

    def validate(self) -> None:
        """Raise ConfigError on the first invalid value."""
        self._check_types()
        if self.interval_ms <= 0:
            raise ConfigError(f"interval_ms must be positive, got {self.interval_ms}")
        if self.history_size <= 0:
            raise ConfigError(f"history_size must be positive, got {self.history_size}")
        if self.pid is not None and self.pid <= 0:
            raise ConfigError(f"pid must be positive, got {self.pid}")
        if self.trace_python_heap and self.pid is not None and self.pid != os.getpid():
            raise ConfigError("trace_python_heap only applies to this process; unset it or pid")
        if self.memory_window < 2:
            raise ConfigError(f"memory_window must be at least 2, got {self.memory_window}")
        if not 0 < self.memory_increase_ratio <= 1:
            raise ConfigError(f"memory_increase_ratio must be in (0, 1], got {self.memory_increase_ratio}")
        if not self.cpu_load_ratio > 0:
            raise ConfigError(f"cpu_load_ratio must be positive, got {self.cpu_load_ratio}")
        if not self.duration_seconds > 0:
            raise ConfigError(f"duration_seconds must be positive, got {self.duration_seconds}")

    def _check_types(self) -> None:
        # bool is a subclass of int, so it is rejected explicitly for numeric fields
        for name in ("interval_ms", "history_size", "memory_window"):
            _require(name, getattr(self, name), int)
        for name in ("memory_increase_ratio", "cpu_load_ratio", "duration_seconds"):
            _require(name, getattr(self, name), Real)
        if self.pid is not None:
            _require("pid", self.pid, int)
        if not isinstance(self.trace_python_heap, bool):
            raise ConfigError(f"trace_python_heap must be true or false, got {self.trace_python_heap!r}")
        for name in ("output_file", "log_file"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"{name} must be a path string, got {value!r}")

    @property
    def output_path(self) -> Optional[Path]:
        return Path(self.output_file) if self.output_file else None

    @property
    def log_path(self) -> Optional[Path]:
        return Path(self.log_file) if self.log_file else None

    def build_monitor(self, reader: Optional[MetricReader] = None) -> SamplingMonitor:
        """Create a SamplingMonitor with this configuration's reader, retention and thresholds."""
        if reader is None:
            reader = MetricReader(pid=self.pid, trace_python_heap=self.trace_python_heap)
        return SamplingMonitor(
            reader=reader,
            history_size=self.history_size,
            detectors=[
                MemoryGrowthDetector(window_size=self.memory_window,
                                     increase_ratio=self.memory_increase_ratio),
                CpuLoadDetector(load_ratio=self.cpu_load_ratio),
            ],
        )
