"""Logging utilities.

We use Python's standard `logging` module with a plain structured format:
- always logs to the console
- also logs to `<log_dir>/meta_emit.log` when a log directory is configured
"""

from __future__ import annotations
import logging
import os
from typing import Optional

FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
DATEFMT = "%Y-%m-%dT%H:%M:%S"


def setup_logging(log_dir: Optional[str] = None, level: str = "INFO") -> None:
    """
    Setup logging configuration.

    Args:
        log_dir: Directory for the log file (console only if None)
        level: Root log level name
    """
    root = logging.getLogger()
    root.setLevel(level)

    fmt = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)

    # File
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(os.path.join(log_dir, "meta_emit.log"), encoding="utf-8")
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Console
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    root.addHandler(ch)
