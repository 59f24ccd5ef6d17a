"""Logger setup shared by every perfmon module."""
import logging
import sys
from pathlib import Path
from typing import List

CONSOLE_FORMAT = '[%(levelname)s] %(message)s'
FILE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s - %(message)s'


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Return the named logger writing `[LEVEL] message` lines to stdout.

    Calling it again for the same name replaces the handlers instead of
    stacking duplicates. Records do not propagate to the root logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)
    logger.propagate = False
    return logger


def add_file_handler(logger: logging.Logger, log_file: Path) -> None:
    """Also write the logger's records, with timestamps, to log_file."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(handler)


def package_loggers() -> List[logging.Logger]:
    """Every logger created so far under the perfmon package."""
    return [
        logging.getLogger(name)
        for name in list(logging.root.manager.loggerDict)
        if name == "perfmon" or name.startswith("perfmon.")
    ]
