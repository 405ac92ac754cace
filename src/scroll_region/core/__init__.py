"""Core infrastructure layer - no domain dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging setup (Loguru)
"""

from .config import (
    Config,
    LoggingConfig,
    ViewportConfig,
    create_default_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    load_config,
    save_config,
)
from .output import get_log_file_path, setup_from_config, setup_loguru

__all__ = [
    "Config",
    "LoggingConfig",
    "ViewportConfig",
    "create_default_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "load_config",
    "save_config",
    "get_log_file_path",
    "setup_from_config",
    "setup_loguru",
]
