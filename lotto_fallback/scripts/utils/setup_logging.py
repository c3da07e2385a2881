"""Logging configuration utilities."""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = 'lottery.log'


def setup_logging(log_dir: Optional[Path] = None, level: int = logging.INFO) -> Path:
    """Configure logging with file and console handlers. Returns the log file path."""
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_dir = Path(log_dir) if log_dir is not None else Path('logs')
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    file_handler = logging.FileHandler(log_file, mode='a')  # Append mode
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    return log_file
