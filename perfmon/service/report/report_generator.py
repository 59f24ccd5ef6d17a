"""
Report Generator Module

Aggregates a snapshot history into memory/CPU statistics and a heap trend.
"""
from typing import Sequence, Union

from perfmon.models.report import CpuStats, MemoryStats, MonitorReport, NoDataReport
from perfmon.models.snapshot import Snapshot
from perfmon.util.cal_utils import classify_trend, min_max_avg


def generate_report(history: Sequence[Snapshot]) -> Union[MonitorReport, NoDataReport]:
    """
    Build a report over the entire history.

    Args:
        history: Snapshots in sampling order

    Returns:
        MonitorReport, or NoDataReport when the history is empty
    """
    if not history:
        return NoDataReport()

    heap_values = [s.memory.heap_used for s in history]
    cpu_values = [s.cpu.total for s in history]

    heap_min, heap_max, heap_avg = min_max_avg(heap_values)
    cpu_min, cpu_max, cpu_avg = min_max_avg(cpu_values)

    return MonitorReport(
        duration=history[-1].timestamp - history[0].timestamp,
        sample_count=len(history),
        memory=MemoryStats(
            min=heap_min,
            max=heap_max,
            average=heap_avg,
            current=heap_values[-1],
            growth=heap_values[-1] - heap_values[0],
        ),
        cpu=CpuStats(min=cpu_min, max=cpu_max, average=cpu_avg),
        trend=classify_trend(heap_values),
    )
