"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging setup (Loguru)
"""

from .config import (
    Config,
    load_config,
    get_config_dir,
    get_config_path,
)
from .output import setup_loguru

__all__ = [
    "Config",
    "load_config",
    "get_config_dir",
    "get_config_path",
    "setup_loguru",
]
