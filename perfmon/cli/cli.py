"""Command-line arguments for perfmon.run_monitor."""
import argparse
from typing import Optional, Sequence

from perfmon.config.monitor_config import MonitorConfig


def build_monitor_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Sample process memory/CPU/load and report trends and anomalies")
    ap.add_argument("--env", type=str, default=None,
                    help="Also load config_<env>.yaml over config.yaml (e.g. 'dev')")
    ap.add_argument("--config-dir", type=str, default=None,
                    help="Directory holding config.yaml (default: bundled config_yaml)")
    ap.add_argument("--duration", type=float, default=None,
                    help="Seconds to sample (overrides duration_seconds)")
    ap.add_argument("--interval-ms", type=int, default=None,
                    help="Sampling interval in milliseconds (overrides interval_ms)")
    ap.add_argument("--pid", type=int, default=None,
                    help="Process ID to monitor (default: from config, else this process)")
    ap.add_argument("--out", type=str, default=None,
                    help="If set, write the report as JSON to this path")
    return ap


def parse_monitor_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_monitor_parser().parse_args(argv)


def apply_overrides(config: MonitorConfig, args: argparse.Namespace) -> MonitorConfig:
    """Copy explicit command-line values over the loaded configuration and re-validate."""
    if args.duration is not None:
        config.duration_seconds = args.duration
    if args.interval_ms is not None:
        config.interval_ms = args.interval_ms
    if args.pid is not None:
        config.pid = args.pid
    if args.out is not None:
        config.output_file = args.out
    config.validate()
    return config
