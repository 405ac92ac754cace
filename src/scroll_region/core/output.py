"""
Logging setup using Loguru.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import LoggingConfig, get_data_dir

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def get_log_file_path(logging_config: Optional[LoggingConfig] = None) -> Path:
    """Get the log file path, honoring a configured override."""
    if logging_config is not None and logging_config.log_file:
        return Path(logging_config.log_file).expanduser()
    return get_data_dir() / "scroll-region.log"


def setup_loguru(
    log_file: Path,
    level: str = "INFO",
    rotation_mb: int = 10,
    retention: int = 5,
    console_output: bool = False,
) -> None:
    """
    Configure loguru for file logging, with optional stderr output.

    Terminal hosts own the screen, so console output is off by default.

    Args:
        log_file: Path to log file
        level: Minimum level for logging (TRACE, DEBUG, INFO, WARNING, ERROR)
        rotation_mb: File size in MB that triggers rotation
        retention: Number of rotated files to keep
        console_output: Also log to stderr
    """
    # Remove default handler
    logger.remove()

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        rotation=f"{rotation_mb} MB",
        retention=retention,
        level=level,
        format=LOG_FORMAT,
        enqueue=False,  # Synchronous writes
    )

    if console_output:
        logger.add(sys.stderr, level=level, format="{level}: {message}")

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def setup_from_config(logging_config: LoggingConfig) -> Path:
    """Configure loguru from a LoggingConfig section.

    Returns:
        Path of the log file in use
    """
    log_file = get_log_file_path(logging_config)
    setup_loguru(
        log_file,
        level=logging_config.level,
        rotation_mb=logging_config.max_file_size_mb,
        retention=logging_config.backup_count,
        console_output=logging_config.console_output,
    )
    return log_file
