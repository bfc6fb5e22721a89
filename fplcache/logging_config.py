"""Centralized logging configuration for the FPL cache builder."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = 'fplcache'


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the ``fplcache`` logger for a fetch run.

    Console output is always short-form. A timestamped log file is only
    written when ``log_dir`` is given, since scheduled runs usually rely on
    the scheduler capturing stdout.

    Args:
        log_dir: Directory for a per-run log file (default: no file)
        level: Logging level (default: INFO)
        log_to_console: Whether to log to stdout (default: True)

    Returns:
        Configured logger instance

    Example:
        from fplcache.logging_config import setup_logging
        logger = setup_logging(log_dir=Path('logs'))
        logger.info('Fetching bootstrap-static')
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Re-running setup (tests, repeated CLI calls) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f'fetch_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
        )
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

    return logger
