#!/usr/bin/env python3
"""
Sampling monitor runner.

Samples a process for a fixed duration, logs anomaly warnings as they
happen and prints the resulting report.
"""
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from tabulate import tabulate

from perfmon.cli.cli import apply_overrides, parse_monitor_args
from perfmon.config.config_loader import DEFAULT_CONFIG_PATH, ConfigLoader
from perfmon.exceptions import PerfmonError
from perfmon.models.report import MonitorReport
from perfmon.util.log_config import add_file_handler, package_loggers, setup_logger

logger = setup_logger(__name__)


def print_report(report: MonitorReport) -> None:
    """Print report statistics as a table"""
    logger.info(f"Samples: {report.sample_count}  Duration: {report.duration:.2f}s  Heap trend: {report.trend.value}")
    headers = ["Metric", "Min", "Max", "Average", ""]
    print(tabulate(report.format_rows(), headers=headers, tablefmt="github", stralign="right", numalign="right"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_monitor_args(argv)
    config_path = Path(args.config_dir) if args.config_dir else DEFAULT_CONFIG_PATH

    try:
        config = apply_overrides(ConfigLoader(config_path, env=args.env).config_data, args)
        monitor = config.build_monitor()
    except PerfmonError as e:
        logger.error(str(e))
        return 1

    if config.log_path:
        for pkg_logger in {*package_loggers(), logger}:
            add_file_handler(pkg_logger, config.log_path)

    if args.env:
        logger.info(f"Loaded configuration with environment override: {args.env}")

    logger.info("=" * 60)
    logger.info(f"Sampling every {config.interval_ms} ms for {config.duration_seconds}s")
    logger.info("=" * 60)

    with monitor.sampling(config.interval_ms):
        try:
            time.sleep(config.duration_seconds)
        except KeyboardInterrupt:
            logger.info("Interrupted, stopping early")

    report = monitor.generate_report()
    if not report.has_data:
        logger.error(f"No report: {report.message}")
        return 1

    print_report(report)
    if monitor.warnings:
        logger.info(f"{len(monitor.warnings)} warning(s) emitted during the run")

    if config.output_path:
        config.output_path.parent.mkdir(parents=True, exist_ok=True)
        report.save_to_file(str(config.output_path))
        logger.info(f"✓ Report exported to: {config.output_path.resolve()}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
