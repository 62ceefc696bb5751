"""
PathBoost Runtime Configuration

Resolves the effective BoostConfig from defaults, config.yaml,
and environment variables.
"""

import dataclasses
import os
from pathlib import Path
from typing import Optional

from pathboost.configs.boost import DEFAULT_BOOST_CONFIG, BoostConfig, parse_boost_config
from pathboost.configs.logging import get_logger
from pathboost.configs.yaml_config import load_yaml_config

logger = get_logger("config.runtime")

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")


def _env_enabled_override() -> Optional[bool]:
    """Read PATHBOOST_BOOST_ENABLED, or None when unset or unrecognized."""
    raw = os.environ.get("PATHBOOST_BOOST_ENABLED")
    if raw is None or not raw.strip():
        return None

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False

    logger.warning(f"Ignoring PATHBOOST_BOOST_ENABLED={raw!r}: expected true/false")
    return None


def get_boost_config(path: Optional[Path] = None) -> BoostConfig:
    """
    Get the boost configuration merged from defaults, YAML, and environment.

    Priority (highest wins):
    1. PATHBOOST_BOOST_ENABLED environment variable (enabled flag only)
    2. `boost` section of config.yaml
    3. DEFAULT_BOOST_CONFIG when config.yaml has no `boost` section

    Args:
        path: Override config file location

    Returns:
        Effective BoostConfig

    Raises:
        ConfigurationError: If config.yaml or its boost section is malformed
    """
    yaml_config = load_yaml_config(path)

    if "boost" in yaml_config:
        cfg = parse_boost_config(yaml_config["boost"])
    else:
        cfg = DEFAULT_BOOST_CONFIG

    enabled = _env_enabled_override()
    if enabled is not None and enabled != cfg.enabled:
        logger.debug(f"Boost enabled overridden by environment: {enabled}")
        cfg = dataclasses.replace(cfg, enabled=enabled)

    logger.debug(
        f"Boost config: enabled={cfg.enabled}, "
        f"{len(cfg.penalties)} penalties, {len(cfg.bonuses)} bonuses"
    )
    return cfg
