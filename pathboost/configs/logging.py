"""
PathBoost Logging Configuration

PathBoost is a library with no entry point of its own. Its modules only
log through get_logger() under the "pathboost" namespace; without any
setup those records propagate to whatever the host application has
configured on the root logger.

A host that wants PathBoost's own handlers (say, the query pipeline that
calls apply_boost(), at startup) calls setup_logging() once. It reads:
- PATHBOOST_DEBUG: Enable debug logging, including per-result boost traces (default: false)
- PATHBOOST_LOG_FILE: Log file path (default: ~/.pathboost/pathboost.log)
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from pathboost.configs.paths import get_data_path


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for PathBoost.

    Args:
        debug: Enable debug level. Defaults to PATHBOOST_DEBUG env var.
        log_file: Log file path. Defaults to PATHBOOST_LOG_FILE env var,
                  or $PATHBOOST_DATA_PATH/pathboost.log if not set.
                  Pass an empty string to log to stderr only.

    Returns:
        Root logger for pathboost
    """
    # Read from env if not provided
    if debug is None:
        debug = os.environ.get("PATHBOOST_DEBUG", "").lower() in ("true", "1", "yes")
    if log_file is None:
        log_file = os.environ.get("PATHBOOST_LOG_FILE")
        if log_file is None:
            log_file = str(get_data_path() / "pathboost.log")

    level = logging.DEBUG if debug else logging.INFO

    # Create formatter with component tags
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("pathboost")
    logger.setLevel(level)

    # Clear existing handlers
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    # Always add stderr handler (but only for warnings+ when logging to file)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    if log_file:
        stderr_handler.setLevel(logging.WARNING)
    else:
        stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    if log_file:
        # Ensure log directory exists
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {log_file}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "search.boost", "config")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"pathboost.{component}")
