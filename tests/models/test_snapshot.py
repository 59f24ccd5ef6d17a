"""Tests for snapshot validation and serialization."""

import json

import pytest

from perfmon.consts.WarningKind import WarningKind
from perfmon.models import AnomalyWarning, CpuTimes, MemoryInfo, Snapshot, SystemInfo
from tests.helpers import make_snapshot


def test_cpu_total_sums_user_and_system() -> None:
    assert CpuTimes(user=1.25, system=0.5).total == 1.75


@pytest.mark.parametrize(
    "build",
    [
        lambda: MemoryInfo(rss=-1, heap_total=0, heap_used=0, external=0),
        lambda: CpuTimes(user=0.0, system=-0.1),
        lambda: SystemInfo(load_1=-1.0, load_5=0, load_15=0, free_memory=0,
                           total_memory=0, uptime=0, cpu_count=1),
        lambda: make_snapshot(timestamp=-1.0),
    ],
)
def test_negative_values_are_rejected(build) -> None:
    with pytest.raises(ValueError):
        build()


def test_dict_round_trip_through_json() -> None:
    snapshot = make_snapshot(timestamp=12.5, heap_used=4096, load_1=0.75)

    restored = Snapshot.from_dict(json.loads(json.dumps(snapshot.to_dict())))

    assert restored == snapshot


def test_warning_to_dict_uses_kind_value() -> None:
    warning = AnomalyWarning(kind=WarningKind.HIGH_CPU_LOAD, message="busy",
                             values={"load_average": 3.3})

    assert warning.to_dict() == {
        "kind": "high_cpu_load",
        "message": "busy",
        "values": {"load_average": 3.3},
    }
