"""Configuration module for the sampling monitor."""

from .config_loader import ConfigLoader
from .monitor_config import MonitorConfig

__all__ = ["ConfigLoader", "MonitorConfig"]
