"""
Logging setup using Loguru.
"""

import sys
from pathlib import Path

from loguru import logger

from .config import LoggingConfig

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def setup_loguru(config: LoggingConfig) -> None:
    """
    Configure loguru sinks for the web process.

    Args:
        config: Logging section of the application config
    """
    # Remove default handler
    logger.remove()

    if config.console_output:
        logger.add(sys.stderr, level=config.level, format=LOG_FORMAT)

    if config.log_file:
        log_file = Path(config.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            rotation=config.rotation,
            retention=config.retention,
            level=config.level,
            format=LOG_FORMAT,
            enqueue=True,  # Safe across uvicorn worker threads
        )

    logger.info(
        f"Loguru initialized (level={config.level}, file={config.log_file or 'none'})"
    )
