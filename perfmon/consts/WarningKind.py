from enum import Enum


class WarningKind(Enum):
    MEMORY_LEAK = "memory_leak"
    HIGH_CPU_LOAD = "high_cpu_load"
