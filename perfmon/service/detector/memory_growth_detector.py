from typing import Optional, Sequence

from perfmon.consts.WarningKind import WarningKind
from perfmon.models.anomaly_warning import AnomalyWarning
from perfmon.models.snapshot import Snapshot
from perfmon.service.detector.detector import Detector
from perfmon.util.cal_utils import count_increases, tail

DEFAULT_WINDOW_SIZE = 10
DEFAULT_INCREASE_RATIO = 0.7


class MemoryGrowthDetector(Detector):
    """
    Flag a potential memory leak when heap usage keeps climbing.

    Looks at the last `window_size` heap-used values and fires when the
    number of strict increases between neighbours is greater than
    `increase_ratio * window_size` (more than 7 of 9 with the defaults).
    Sawtooth GC patterns can trip it; it is a tripwire, not a proof.
    """

    def __init__(self, window_size: int = DEFAULT_WINDOW_SIZE,
                 increase_ratio: float = DEFAULT_INCREASE_RATIO):
        if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size < 2:
            raise ValueError(f"window_size must be an integer of at least 2, got {window_size!r}")
        if not 0 < increase_ratio <= 1:
            raise ValueError(f"increase_ratio must be in (0, 1], got {increase_ratio}")
        self.window_size = window_size
        self.increase_ratio = increase_ratio

    @property
    def threshold(self) -> float:
        return self.increase_ratio * self.window_size

    def detect(self, snapshot: Snapshot, history: Sequence[Snapshot]) -> Optional[AnomalyWarning]:
        if len(history) < self.window_size:
            return None

        recent = tail(list(history), self.window_size)
        increases = count_increases([s.memory.heap_used for s in recent])
        if increases <= self.threshold:
            return None

        heap_used = snapshot.memory.heap_used
        return AnomalyWarning(
            kind=WarningKind.MEMORY_LEAK,
            message=(f"Potential memory leak: heap used rose in {increases} of "
                     f"{self.window_size - 1} recent samples, now {heap_used / (1024 * 1024):.2f} MB"),
            values={
                'heap_used': heap_used,
                'increases': increases,
                'window_size': self.window_size,
            },
        )
