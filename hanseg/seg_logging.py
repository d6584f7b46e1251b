#!/usr/bin/env python3
"""
seg_logging.py

Centralized logging configuration for the segmenter.
Provides consistent logging setup with Rich formatting and file output.
"""
import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


def setup_segmenter_logging(out_dir: Path, logger_name: str = 'hanseg', level: str = 'INFO') -> logging.Logger:
    """
    Setup logging for the segmenter.

    Args:
        out_dir: Directory where hanseg.log will be written
        logger_name: Name for the logger (default: 'hanseg')
        level: Console log level name

    Returns:
        Configured logger instance
    """
    out_dir.mkdir(parents=True, exist_ok=True)

    # Clear any existing handlers to avoid conflicts
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    console = Console()

    detailed_formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(funcName)-20s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    log_file = out_dir / "hanseg.log"
    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)

    console_handler = RichHandler(
        console=console,
        show_path=False,
        rich_tracebacks=True,
        markup=True
    )
    console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = True

    logger.info(f"Segmenter logging started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info(f"Log file: {log_file}")

    return logger


def get_segmenter_logger(logger_name: str = 'hanseg') -> logging.Logger:
    """
    Get the segmenter logger, creating a basic one if none exists.
    """
    logger = logging.getLogger(logger_name)
    has_handlers = bool(logger.handlers) or (logger.parent is not None and bool(logger.parent.handlers))

    if not has_handlers:
        # Only show warnings/errors when nothing has been configured
        console = Console()
        handler = RichHandler(console=console, show_path=False)
        handler.setLevel(logging.WARNING)
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
    return logger
