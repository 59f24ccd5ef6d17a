"""Exceptions raised by the sampling monitor."""


class PerfmonError(Exception):
    """Base class for monitor errors"""


class SnapshotUnavailableError(PerfmonError):
    """A metric read failed; the sample is skipped"""


class MonitorStateError(PerfmonError):
    """The sampling loop was asked to do something its state does not allow"""


class ConfigError(PerfmonError):
    """Configuration file is missing a value or holds an invalid one"""
