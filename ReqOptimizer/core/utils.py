"""
Logging setup shared by the optimizer entry points.
"""

import logging
import os
import time
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    log_type: str,
    run_name: str,
    log_dir: Optional[Union[str, Path]] = None,
    *,
    level: int = logging.INFO,
    session_id: Optional[int] = None,
) -> logging.Logger:
    """Sets up a logger for an optimization run; writes to a file as well when log_dir is given."""
    logger = logging.getLogger(f"{log_type}_{run_name}_logger")
    logger.setLevel(level)

    session = int(time.time()) if session_id is None else int(session_id)
    formatter = logging.Formatter(
        f'%(asctime)s - %(levelname)s - [Session: {session}]-[Run: {run_name}] - %(message)s'
    )

    # Prevent adding the same handlers twice if the logger already exists
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_dir is not None:
        log_dir_path = Path(log_dir)
        log_dir_path.mkdir(parents=True, exist_ok=True)
        log_file = os.path.abspath(log_dir_path / f"{log_type}_logs.log")
        if not any(
            isinstance(h, logging.FileHandler) and h.baseFilename == log_file
            for h in logger.handlers
        ):
            file_handler = logging.FileHandler(log_file, mode='a')  # Append mode
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
