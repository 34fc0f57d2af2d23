# -*- coding: utf-8 -*-
"""
Centralized logging configuration for the report pipeline

The CLI calls setup_logging() once; every module then uses
logger = logging.getLogger(__name__). Load warnings (skipped files) and chain
diagnostics (cyclic author lists) all flow through here.

Examples:
    # In the entry point
    from iswc_report.utils.logger import setup_logging
    setup_logging(log_file="logs/report.log")

    # In any module
    import logging
    logger = logging.getLogger(__name__)
    logger.warning("Skipped broken.ttl")

"""
# Standard library
import logging
import sys
from pathlib import Path
from typing import Optional

# Global flag to prevent duplicate configuration
_logging_configured = False

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    force: bool = False,
) -> None:
    """
    Configure logging for the report run.

    Console output goes to stderr so the report itself can be piped. Only the
    first call configures handlers unless force is set.

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Optional path to log file; parent directories are created
        format_string: Log message format
        force: Reconfigure even if logging was already set up
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    formatter = logging.Formatter(format_string)
    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True
    )

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
