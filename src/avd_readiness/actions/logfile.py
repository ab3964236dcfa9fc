"""Run log file.

The log is a point-in-time diagnostic: it is truncated when a run starts
and every line written during the run carries a timestamp.
"""

import contextlib
import logging
from collections.abc import Iterator
from pathlib import Path

LOGGER_NAME = "avd_readiness"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@contextlib.contextmanager
def run_log(path: Path | str, level: int = logging.INFO) -> Iterator[logging.Logger]:
    """Attach a truncating file handler to the package logger for one run."""
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(level)

    package_logger = logging.getLogger(LOGGER_NAME)
    previous_level = package_logger.level
    package_logger.addHandler(handler)
    if previous_level == logging.NOTSET or previous_level > level:
        package_logger.setLevel(level)

    try:
        yield package_logger
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)
        handler.close()
