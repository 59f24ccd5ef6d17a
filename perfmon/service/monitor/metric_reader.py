"""
Metric Reader Module

Reads instantaneous process and host metrics through psutil.
"""
import os
import time
import tracemalloc
from typing import Optional

import psutil

from perfmon.exceptions import SnapshotUnavailableError
from perfmon.models.snapshot import CpuTimes, MemoryInfo, Snapshot, SystemInfo
from perfmon.util.log_config import setup_logger

logger = setup_logger(__name__)

# Spacing forced between snapshots when the monotonic clock has not advanced
MIN_TICK = 1e-6


class MetricReader:
    """Capture resource usage snapshots of a process"""

    def __init__(self, pid: Optional[int] = None, trace_python_heap: bool = False):
        """
        Initialize metric reader.

        Args:
            pid: Process ID to read (default: the current process)
            trace_python_heap: Report tracemalloc's traced size as heap used.
                Only valid for the current process.

        Raises:
            ValueError: if heap tracing is requested for another process
        """
        if trace_python_heap and pid is not None and pid != os.getpid():
            raise ValueError(f"trace_python_heap cannot observe process {pid}; tracemalloc only sees this process")

        self.pid = pid
        self.trace_python_heap = trace_python_heap
        self._process: Optional[psutil.Process] = None
        self._last_timestamp: Optional[float] = None

        if trace_python_heap and not tracemalloc.is_tracing():
            tracemalloc.start()
            logger.debug("tracemalloc started for heap tracing")

    @property
    def process(self) -> psutil.Process:
        if self._process is None:
            try:
                self._process = psutil.Process(self.pid)
            except psutil.Error as e:
                raise SnapshotUnavailableError(f"Process {self.pid} not available: {e}") from e
        return self._process

    def capture(self) -> Snapshot:
        """
        Read one snapshot.

        Raises:
            SnapshotUnavailableError: if any OS query fails
        """
        try:
            process = self.process
            with process.oneshot():
                mem_info = process.memory_info()
                cpu_times = process.cpu_times()
            load_1, load_5, load_15 = psutil.getloadavg()
            virtual_memory = psutil.virtual_memory()
            uptime = max(0.0, time.time() - psutil.boot_time())
            cpu_count = psutil.cpu_count(logical=True) or 1
        except (psutil.Error, OSError) as e:
            raise SnapshotUnavailableError(f"Metric read failed: {e}") from e

        if self.trace_python_heap and tracemalloc.is_tracing():
            heap_used, _ = tracemalloc.get_traced_memory()
        else:
            heap_used = mem_info.rss

        # Monotonic ordering; wall time is recorded separately
        timestamp = time.monotonic()
        if self._last_timestamp is not None and timestamp <= self._last_timestamp:
            timestamp = self._last_timestamp + MIN_TICK
        self._last_timestamp = timestamp

        return Snapshot(
            timestamp=timestamp,
            memory=MemoryInfo(
                rss=mem_info.rss,
                heap_total=mem_info.vms,
                heap_used=heap_used,
                # 'shared' exists on Linux only
                external=getattr(mem_info, "shared", 0),
            ),
            cpu=CpuTimes(user=cpu_times.user, system=cpu_times.system),
            system=SystemInfo(
                load_1=load_1,
                load_5=load_5,
                load_15=load_15,
                free_memory=virtual_memory.available,
                total_memory=virtual_memory.total,
                uptime=uptime,
                cpu_count=cpu_count,
            ),
            wall_time=time.time(),
        )
