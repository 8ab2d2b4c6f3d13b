"""Logging setup for scoring runs."""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .config import get_config

LOGGER_NAME = 'gridcards'
LEVEL_ENV_VAR = 'GRIDCARDS_LOG_LEVEL'

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def _resolve_level(level: Union[int, str, None]) -> int:
    """GRIDCARDS_LOG_LEVEL wins over the caller's level; unknown names fall back to INFO."""
    override = os.environ.get(LEVEL_ENV_VAR)
    if override:
        level = override
    if level is None:
        return logging.INFO
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Union[int, str, None] = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the ``gridcards`` logger for a scoring run.

    Each call replaces previously installed handlers. With ``log_to_file`` a
    ``score_week_<timestamp>.log`` file is written to ``log_dir`` (default:
    ``log_dir`` from scoring_config.json). Console output goes to stderr so
    ``score_week.py --json`` keeps stdout clean.

    Args:
        log_dir: Directory for run log files
        level: Logging level or level name; GRIDCARDS_LOG_LEVEL overrides it
        log_to_file: Write a per-run log file
        log_to_console: Log to stderr

    Returns:
        The configured ``gridcards`` logger
    """
    level = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    if log_to_file:
        log_dir = Path(log_dir or get_config().log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        file_handler = logging.FileHandler(log_dir / f'score_week_{stamp}.log', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``gridcards`` namespace, e.g. ``get_logger('orchestrator')``."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(f'{LOGGER_NAME}.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{LOGGER_NAME}.{name}')
