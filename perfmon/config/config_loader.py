"""
Configuration loader for the sampling monitor.

This module provides the ConfigLoader class for loading and validating
monitor configuration from YAML files.
"""
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from perfmon.config.monitor_config import MonitorConfig
from perfmon.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config_yaml"


class ConfigLoader:

    def __init__(self, config_path: Path = DEFAULT_CONFIG_PATH, env: Optional[str] = None):
        self.config_path = Path(config_path)
        self.env = env
        self.config_data = self._load_config()

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {file_path}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {file_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Top level of {file_path} must be a mapping")
        return data

    def _load_config(self) -> MonitorConfig:
        """
        Load and parse monitor configuration from YAML file.
        Supports environment-specific overrides via config_<env>.yaml

        Returns:
            MonitorConfig: Validated monitor configuration instance
        """
        data = self._read_yaml(self.config_path / "config.yaml")

        if self.env:
            # dict.update() overwrites existing keys
            data.update(self._read_yaml(self.config_path / f"config_{self.env}.yaml"))

        known = {f.name for f in fields(MonitorConfig)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        try:
            config = MonitorConfig(**data)
        except TypeError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        config.validate()
        return config
