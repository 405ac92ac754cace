"""
Configuration management for scroll-region
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from loguru import logger


@dataclass
class ViewportConfig:
    """Configuration for how a host sizes and scrolls regions."""

    reserved_rows: int = 2  # Terminal rows kept for status/command lines
    scroll_step: int = 3  # Lines moved per step scroll
    page_overlap: int = 1  # Lines kept on screen when paging

    def validate(self) -> None:
        """Validate viewport configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        for name in ("reserved_rows", "scroll_step", "page_overlap"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.reserved_rows < 0:
            raise ValueError(f"reserved_rows must be >= 0, got {self.reserved_rows}")
        if self.scroll_step < 1:
            raise ValueError(f"scroll_step must be >= 1, got {self.scroll_step}")
        if self.page_overlap < 0:
            raise ValueError(f"page_overlap must be >= 0, got {self.page_overlap}")


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # One of LOG_LEVELS
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/scroll-region/scroll-region.log)
    )
    max_file_size_mb: int = 10  # Maximum log file size before rotation
    backup_count: int = 5  # Number of rotated files to keep
    console_output: bool = False  # Also output to stderr (for debugging)

    def validate(self) -> None:
        """Validate logging configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.level!r}. Valid levels are: {', '.join(LOG_LEVELS)}"
            )
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ValueError(f"log_file must be a string, got {self.log_file!r}")
        for name in ("max_file_size_mb", "backup_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.max_file_size_mb < 1:
            raise ValueError(f"max_file_size_mb must be >= 1, got {self.max_file_size_mb}")
        if self.backup_count < 0:
            raise ValueError(f"backup_count must be >= 0, got {self.backup_count}")
        if not isinstance(self.console_output, bool):
            raise ValueError(f"console_output must be a boolean, got {self.console_output!r}")


@dataclass
class Config:
    """Main configuration object."""

    viewport: ViewportConfig = field(default_factory=ViewportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "scroll-region"
    return Path.home() / ".config" / "scroll-region"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "scroll-region"
    return Path.home() / ".local" / "share" / "scroll-region"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/scroll-region (or ~/.config/scroll-region)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# scroll-region configuration

[viewport]
# Terminal rows not available to the scrolling region (status/command lines)
reserved_rows = 2

# Lines moved by a single step scroll
scroll_step = 3

# Lines kept on screen from the previous page when paging up/down
page_overlap = 1

[logging]
# Log level (TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/scroll-region/scroll-region.log)
# log_file = "/path/to/custom/scroll-region.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of rotated log files to keep
backup_count = 5

# Also output logs to stderr (useful for debugging)
console_output = false
""".strip()


def _parse_viewport(data: Any, default: ViewportConfig) -> ViewportConfig:
    try:
        if not isinstance(data, dict):
            raise ValueError(f"expected a table, got {data!r}")
        viewport = ViewportConfig(
            reserved_rows=data.get("reserved_rows", default.reserved_rows),
            scroll_step=data.get("scroll_step", default.scroll_step),
            page_overlap=data.get("page_overlap", default.page_overlap),
        )
        viewport.validate()
    except (TypeError, ValueError) as e:
        logger.warning(f"Invalid viewport configuration: {e}. Using defaults.")
        return ViewportConfig()
    return viewport


def _parse_logging(data: Any, default: LoggingConfig) -> LoggingConfig:
    try:
        if not isinstance(data, dict):
            raise ValueError(f"expected a table, got {data!r}")
        log_file = data.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ValueError(f"log_file must be a string, got {log_file!r}")
        logging_config = LoggingConfig(
            level=str(data.get("level", default.level)).upper(),
            log_file=str(Path(log_file).expanduser()) if log_file else None,
            max_file_size_mb=data.get("max_file_size_mb", default.max_file_size_mb),
            backup_count=data.get("backup_count", default.backup_count),
            console_output=data.get("console_output", default.console_output),
        )
        logging_config.validate()
    except (TypeError, ValueError) as e:
        logger.warning(f"Invalid logging configuration: {e}. Using defaults.")
        return LoggingConfig()
    return logging_config


def _toml_string(value: str) -> str:
    """Quote a value as a TOML basic string."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    Never raises: a missing file yields defaults, and an unreadable file or
    invalid section is logged and replaced with defaults.

    Args:
        config_path: Explicit config file (default: get_config_path())

    Returns:
        Parsed configuration
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        logger.debug(f"No configuration at {config_path}, using defaults")
        return Config()

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Error loading configuration from {config_path}: {e}")
        return Config()

    config = Config()

    if "viewport" in toml_data:
        config.viewport = _parse_viewport(toml_data["viewport"], config.viewport)

    if "logging" in toml_data:
        config.logging = _parse_logging(toml_data["logging"], config.logging)

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def save_config(config: Config, config_path: Optional[Path] = None) -> Path:
    """Write configuration to TOML, creating parent directories.

    Returns:
        Path the configuration was written to
    """
    if config_path is None:
        config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    lines = [
        "[viewport]",
        f"reserved_rows = {config.viewport.reserved_rows}",
        f"scroll_step = {config.viewport.scroll_step}",
        f"page_overlap = {config.viewport.page_overlap}",
        "",
        "[logging]",
        f"level = {_toml_string(config.logging.level)}",
    ]
    if config.logging.log_file:
        lines.append(f"log_file = {_toml_string(config.logging.log_file)}")
    lines += [
        f"max_file_size_mb = {config.logging.max_file_size_mb}",
        f"backup_count = {config.logging.backup_count}",
        f"console_output = {'true' if config.logging.console_output else 'false'}",
    ]

    with open(config_path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    return config_path
