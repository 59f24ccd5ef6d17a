from enum import Enum


class TrendType(Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"
