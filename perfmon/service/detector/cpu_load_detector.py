from typing import Optional, Sequence

from perfmon.consts.WarningKind import WarningKind
from perfmon.models.anomaly_warning import AnomalyWarning
from perfmon.models.snapshot import Snapshot
from perfmon.service.detector.detector import Detector

DEFAULT_LOAD_RATIO = 0.8


class CpuLoadDetector(Detector):
    """Flag high CPU load when the 1-minute load average exceeds load_ratio * cores"""

    def __init__(self, load_ratio: float = DEFAULT_LOAD_RATIO):
        if load_ratio <= 0:
            raise ValueError(f"load_ratio must be positive, got {load_ratio}")
        self.load_ratio = load_ratio

    def detect(self, snapshot: Snapshot, history: Sequence[Snapshot]) -> Optional[AnomalyWarning]:
        load_average = snapshot.system.load_1
        cpu_count = snapshot.system.cpu_count
        threshold = self.load_ratio * cpu_count
        if load_average <= threshold:
            return None

        return AnomalyWarning(
            kind=WarningKind.HIGH_CPU_LOAD,
            message=f"High CPU load: load average {load_average:.2f} on {cpu_count} cores",
            values={
                'load_average': load_average,
                'cpu_count': cpu_count,
                'threshold': threshold,
            },
        )
