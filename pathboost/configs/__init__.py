"""
PathBoost Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from pathboost.configs.logging import get_logger, setup_logging

# Paths
from pathboost.configs.paths import ensure_data_dir, get_data_path

# Boost rules
from pathboost.configs.boost import (
    DEFAULT_BOOST_CONFIG,
    BoostConfig,
    BoostRule,
    boost_config_to_dict,
    parse_boost_config,
)

# YAML config
from pathboost.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    create_default_config,
    get_config_path,
    load_yaml_config,
    save_yaml_config,
)

# Runtime
from pathboost.configs.runtime import get_boost_config

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    "ensure_data_dir",
    # Boost rules
    "DEFAULT_BOOST_CONFIG",
    "BoostConfig",
    "BoostRule",
    "boost_config_to_dict",
    "parse_boost_config",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "load_yaml_config",
    "save_yaml_config",
    "create_default_config",
    # Runtime
    "get_boost_config",
]
