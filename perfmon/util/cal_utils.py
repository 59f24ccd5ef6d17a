from typing import List, Sequence, Tuple

import numpy as np

from perfmon.consts.TrendType import TrendType


def min_max_avg(values: Sequence[float]) -> Tuple[float, float, float]:
    """Return (min, max, arithmetic mean) of a non-empty sequence"""
    if not values:
        raise ValueError("min_max_avg() requires at least one value")
    return min(values), max(values), sum(values) / len(values)


def least_squares_slope(values: Sequence[float]) -> float:
    """
    Ordinary least-squares slope of values against their index.

    Fewer than two points have no slope; 0.0 is returned. A constant series
    yields exactly 0.0 since every centered value is zero.
    """
    n = len(values)
    if n < 2:
        return 0.0
    x = np.arange(n, dtype=float)
    y = np.asarray(values, dtype=float)
    dx = x - x.mean()
    dy = y - y.mean()
    return float(np.dot(dx, dy) / np.dot(dx, dx))


def classify_trend(values: Sequence[float]) -> TrendType:
    slope = least_squares_slope(values)
    if slope > 0:
        return TrendType.INCREASING
    if slope < 0:
        return TrendType.DECREASING
    return TrendType.STABLE


def count_increases(values: Sequence[float]) -> int:
    """Number of adjacent pairs where the later value is strictly larger"""
    return sum(1 for prev, cur in zip(values, values[1:]) if cur > prev)


def tail(values: List, size: int) -> List:
    return values[-size:] if size > 0 else []
