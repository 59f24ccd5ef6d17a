"""Tests for YAML configuration loading."""

import os

import pytest

from perfmon.config.config_loader import ConfigLoader
from perfmon.config.monitor_config import MonitorConfig
from perfmon.exceptions import ConfigError
from perfmon.service.detector import CpuLoadDetector, MemoryGrowthDetector
from tests.helpers import CountingReader


def _write(path, text: str) -> None:
    path.write_text(text, encoding="utf-8")


def test_bundled_config_loads_defaults() -> None:
    config = ConfigLoader().config_data

    assert config == MonitorConfig()


def test_bundled_dev_override() -> None:
    config = ConfigLoader(env="dev").config_data

    assert config.interval_ms == 200
    assert config.trace_python_heap is True
    assert config.history_size == MonitorConfig().history_size


def test_env_file_overrides_base(tmp_path) -> None:
    _write(tmp_path / "config.yaml", "interval_ms: 500\nmemory_window: 12\n")
    _write(tmp_path / "config_ci.yaml", "interval_ms: 50\n")

    config = ConfigLoader(tmp_path, env="ci").config_data

    assert config.interval_ms == 50
    assert config.memory_window == 12


def test_empty_file_uses_defaults(tmp_path) -> None:
    _write(tmp_path / "config.yaml", "")
    assert ConfigLoader(tmp_path).config_data == MonitorConfig()


def test_missing_file_raises_config_error(tmp_path) -> None:
    with pytest.raises(ConfigError):
        ConfigLoader(tmp_path)


def test_missing_env_file_raises_config_error(tmp_path) -> None:
    _write(tmp_path / "config.yaml", "interval_ms: 500\n")
    with pytest.raises(ConfigError):
        ConfigLoader(tmp_path, env="prod")


def test_unknown_key_is_rejected(tmp_path) -> None:
    _write(tmp_path / "config.yaml", "interval: 500\n")
    with pytest.raises(ConfigError, match="interval"):
        ConfigLoader(tmp_path)


def test_invalid_yaml_is_rejected(tmp_path) -> None:
    _write(tmp_path / "config.yaml", "interval_ms: [1, 2\n")
    with pytest.raises(ConfigError):
        ConfigLoader(tmp_path)


@pytest.mark.parametrize(
    "line",
    [
        "interval_ms: 0",
        "history_size: -1",
        "memory_window: 1",
        "memory_increase_ratio: 1.5",
        "cpu_load_ratio: 0",
        "duration_seconds: 0",
        "cpu_load_ratio: .nan",
        "pid: 0",
        # wrong types
        'interval_ms: "100"',
        "interval_ms: true",
        "history_size: 10.5",
        "memory_window: 2.5",
        "memory_increase_ratio: null",
        "cpu_load_ratio: fast",
        "duration_seconds: [1]",
        "pid: abc",
        "trace_python_heap: yes please",
        "output_file: 42",
        "log_file: {a: 1}",
    ],
)
def test_invalid_values_are_rejected(tmp_path, line) -> None:
    _write(tmp_path / "config.yaml", line + "\n")
    with pytest.raises(ConfigError):
        ConfigLoader(tmp_path)


def test_build_monitor_applies_thresholds() -> None:
    config = MonitorConfig(history_size=7, memory_window=5, memory_increase_ratio=0.6, cpu_load_ratio=1.5)

    monitor = config.build_monitor(reader=CountingReader())
    memory, cpu = monitor.detectors

    assert isinstance(memory, MemoryGrowthDetector)
    assert memory.window_size == 5
    assert memory.increase_ratio == 0.6
    assert isinstance(cpu, CpuLoadDetector)
    assert cpu.load_ratio == 1.5

    for _ in range(10):
        monitor.sample_once()
    assert len(monitor.history) == 7


def test_numeric_types_are_accepted(tmp_path) -> None:
    _write(tmp_path / "config.yaml", "cpu_load_ratio: 2\nduration_seconds: 0.5\nmemory_increase_ratio: 1\n")

    config = ConfigLoader(tmp_path).config_data

    assert config.cpu_load_ratio == 2
    assert config.duration_seconds == 0.5


def test_heap_tracing_of_another_process_is_rejected() -> None:
    config = MonitorConfig(pid=os.getppid(), trace_python_heap=True)
    with pytest.raises(ConfigError, match="trace_python_heap"):
        config.validate()


def test_heap_tracing_of_own_pid_is_allowed() -> None:
    MonitorConfig(pid=os.getpid(), trace_python_heap=True).validate()
