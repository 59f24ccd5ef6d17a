"""
Sampling Monitor Module

Periodically captures snapshots in a background thread, keeps them in a
bounded history and runs anomaly detectors after every sample.
"""
import threading
from collections import deque
from contextlib import contextmanager
from typing import Callable, Deque, Iterator, List, Optional, Sequence, Union

from perfmon.exceptions import MonitorStateError, SnapshotUnavailableError
from perfmon.models.anomaly_warning import AnomalyWarning
from perfmon.models.report import MonitorReport, NoDataReport
from perfmon.models.snapshot import Snapshot
from perfmon.service.detector.cpu_load_detector import CpuLoadDetector
from perfmon.service.detector.detector import Detector
from perfmon.service.detector.memory_growth_detector import MemoryGrowthDetector
from perfmon.service.monitor.history import DEFAULT_HISTORY_SIZE, History
from perfmon.service.monitor.metric_reader import MetricReader
from perfmon.service.report.report_generator import generate_report
from perfmon.util.log_config import setup_logger

logger = setup_logger(__name__)

WarningListener = Callable[[AnomalyWarning], None]

JOIN_TIMEOUT = 2.0


class SamplingHandle:
    """Owned handle for one sampling session, returned by SamplingMonitor.start()"""

    def __init__(self, monitor: 'SamplingMonitor', interval: float):
        self.monitor = monitor
        self.interval = interval
        self.stop_event = threading.Event()
        self.thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return (not self.stop_event.is_set()
                and self.thread is not None
                and self.thread.is_alive())

    def stop(self) -> None:
        """Stop this session. A handle whose session already ended does nothing."""
        self.monitor._stop_handle(self)


class SamplingMonitor:
    """Monitor resource usage of a process"""

    def __init__(self,
                 reader: Optional[MetricReader] = None,
                 history_size: int = DEFAULT_HISTORY_SIZE,
                 detectors: Optional[Sequence[Detector]] = None,
                 listeners: Optional[Sequence[WarningListener]] = None):
        """
        Initialize sampling monitor.

        Args:
            reader: Snapshot source (default: MetricReader for this process)
            history_size: Number of snapshots retained
            detectors: Detectors run after each sample
                (default: memory growth and CPU load with default thresholds)
            listeners: Callables receiving every emitted warning
        """
        self.reader = reader if reader is not None else MetricReader()
        self._history = History(history_size)
        self.detectors: List[Detector] = (
            list(detectors) if detectors is not None
            else [MemoryGrowthDetector(), CpuLoadDetector()]
        )
        self.listeners: List[WarningListener] = list(listeners or [])
        self._warnings: Deque[AnomalyWarning] = deque(maxlen=history_size)
        self._handle: Optional[SamplingHandle] = None
        self._state_lock = threading.Lock()

    @property
    def history(self) -> List[Snapshot]:
        return self._history.snapshots()

    @property
    def warnings(self) -> List[AnomalyWarning]:
        return list(self._warnings)

    @property
    def is_running(self) -> bool:
        handle = self._handle
        return handle is not None and handle.running

    def add_listener(self, listener: WarningListener) -> None:
        self.listeners.append(listener)

    def start(self, interval_ms: int) -> SamplingHandle:
        """
        Start sampling in a background thread.

        Args:
            interval_ms: Sampling interval in milliseconds

        Returns:
            SamplingHandle for the new session

        Raises:
            ValueError: if interval_ms is not positive
            MonitorStateError: if the monitor is already running
        """
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")

        with self._state_lock:
            if self.is_running:
                raise MonitorStateError("Sampling monitor is already running; stop it first")

            handle = SamplingHandle(self, interval_ms / 1000.0)
            handle.thread = threading.Thread(
                target=self._monitor_loop, args=(handle,), name="perfmon-sampler", daemon=True
            )
            self._handle = handle
            handle.thread.start()

        logger.debug(f"Sampling started every {interval_ms} ms")
        return handle

    def stop(self) -> None:
        """Stop sampling. Calling it when not running is a no-op."""
        handle = self._handle
        if handle is not None:
            self._stop_handle(handle)

    def _stop_handle(self, handle: SamplingHandle) -> None:
        with self._state_lock:
            if self._handle is not handle:
                return
            self._handle = None

        handle.stop_event.set()
        if handle.thread is not None and handle.thread is not threading.current_thread():
            handle.thread.join(timeout=JOIN_TIMEOUT)
        logger.debug("Sampling stopped")

    @contextmanager
    def sampling(self, interval_ms: int) -> Iterator[SamplingHandle]:
        """Sample for the duration of a with-block."""
        handle = self.start(interval_ms)
        try:
            yield handle
        finally:
            handle.stop()

    def _monitor_loop(self, handle: SamplingHandle) -> None:
        """Main monitoring loop (runs in background thread)"""
        while not handle.stop_event.is_set():
            try:
                self.sample_once()
            except Exception as e:
                logger.error(f"Monitor error, sampling stopped: {e}")
                break
            # Sleep until next sample, waking early on stop()
            handle.stop_event.wait(handle.interval)

    def sample_once(self) -> Optional[Snapshot]:
        """
        Capture one snapshot, record it and run the detectors.

        Returns:
            The recorded snapshot, or None if the sample was skipped
        """
        try:
            snapshot = self.reader.capture()
        except SnapshotUnavailableError as e:
            logger.warning(f"Sample skipped: {e}")
            return None

        try:
            self._history.append(snapshot)
        except ValueError as e:
            logger.warning(f"Sample skipped: {e}")
            return None

        history = self._history.snapshots()
        for detector in self.detectors:
            warning = detector.detect(snapshot, history)
            if warning is not None:
                self._emit(warning)

        return snapshot

    def _emit(self, warning: AnomalyWarning) -> None:
        logger.warning(warning.message)
        self._warnings.append(warning)
        for listener in self.listeners:
            try:
                listener(warning)
            except Exception as e:
                logger.error(f"Warning listener {listener!r} failed: {e}")

    def generate_report(self) -> Union[MonitorReport, NoDataReport]:
        return generate_report(self._history.snapshots())
