from .cpu_load_detector import CpuLoadDetector
from .detector import Detector
from .memory_growth_detector import MemoryGrowthDetector

__all__ = ["CpuLoadDetector", "Detector", "MemoryGrowthDetector"]
