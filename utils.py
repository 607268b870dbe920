# utils.py
"""
Utility functions for the OMS client.
Provides logging configuration.
"""

import logging
import sys


def setup_logging(level: int = logging.INFO, log_file: str = "oms_client.log") -> None:
    """
    Configure logging for console and file output.

    Args:
        level: Logging level (default: INFO).
        log_file: Path of the log file.
    """
    root = logging.getLogger()

    if root.handlers:
        return

    root.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # stderr keeps stdout clean for JSON output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
