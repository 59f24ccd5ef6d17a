from abc import ABC, abstractmethod
from typing import Optional, Sequence

from perfmon.models.anomaly_warning import AnomalyWarning
from perfmon.models.snapshot import Snapshot


class Detector(ABC):
    """
    Advisory check run after each new snapshot.

    Implementations read the history only and report a warning or None.
    """

    @abstractmethod
    def detect(self, snapshot: Snapshot, history: Sequence[Snapshot]) -> Optional[AnomalyWarning]:
        pass
