from dataclasses import dataclass, field
from typing import Any, Dict

from perfmon.consts.WarningKind import WarningKind


@dataclass(frozen=True)
class AnomalyWarning:
    """Advisory message emitted by a detector"""
    kind: WarningKind
    message: str
    values: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'kind': self.kind.value,
            'message': self.message,
            'values': dict(self.values),
        }
