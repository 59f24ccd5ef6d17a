"""Tests for the memory-growth heuristic."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from perfmon.consts.WarningKind import WarningKind
from perfmon.service.detector.memory_growth_detector import MemoryGrowthDetector
from tests.helpers import history_of

heap_values = st.integers(min_value=0, max_value=10**9)


def _detect(detector: MemoryGrowthDetector, values):
    history = history_of(values)
    return detector.detect(history[-1], history)


@given(st.lists(heap_values, min_size=1, max_size=9))
def test_never_fires_below_window(values) -> None:
    assert _detect(MemoryGrowthDetector(), values) is None


@given(st.lists(heap_values, min_size=10, max_size=30, unique=True))
def test_never_fires_on_monotonic_decrease(values) -> None:
    assert _detect(MemoryGrowthDetector(), sorted(values, reverse=True)) is None


def test_fires_on_tenth_increasing_sample() -> None:
    detector = MemoryGrowthDetector()
    values = [100 * (i + 1) for i in range(10)]

    assert _detect(detector, values[:9]) is None

    warning = _detect(detector, values)
    assert warning is not None
    assert warning.kind == WarningKind.MEMORY_LEAK
    assert warning.values["heap_used"] == 1000
    assert warning.values["increases"] == 9


def test_seven_increases_is_not_enough() -> None:
    # 7 rises, 2 drops across 9 transitions
    values = [1, 2, 3, 4, 5, 6, 7, 8, 0, 0]
    assert _detect(MemoryGrowthDetector(), values) is None


def test_eight_increases_fires() -> None:
    # one drop, then 8 rises
    values = [5, 1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert _detect(MemoryGrowthDetector(), values) is not None


def test_only_recent_window_is_considered() -> None:
    rising = [100 * (i + 1) for i in range(10)]
    flat = [2000] * 10
    assert _detect(MemoryGrowthDetector(), rising + flat) is None


def test_thresholds_are_configurable() -> None:
    detector = MemoryGrowthDetector(window_size=4, increase_ratio=0.5)
    # 3 rises out of 3 transitions > 0.5 * 4
    assert _detect(detector, [1, 2, 3, 4]) is not None
    # 2 rises is not greater than 2
    assert _detect(detector, [1, 2, 3, 1]) is None


@pytest.mark.parametrize("window_size, ratio", [(1, 0.7), (2.5, 0.7), (10, 0.0), (10, 1.5)])
def test_rejects_invalid_thresholds(window_size, ratio) -> None:
    with pytest.raises(ValueError):
        MemoryGrowthDetector(window_size=window_size, increase_ratio=ratio)
