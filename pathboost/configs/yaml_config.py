"""
PathBoost YAML Configuration

Loading, saving, and defaults for ~/.pathboost/config.yaml.
"""

from pathlib import Path
from typing import Optional

import yaml

from pathboost.configs.logging import get_logger
from pathboost.configs.paths import ensure_data_dir, get_data_path
from pathboost.exceptions import ConfigurationError

logger = get_logger("config.yaml")

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# PathBoost Configuration
# Edit this file to customize how search results are re-ranked.

# Path Boosting
# Each rule multiplies a result's score by `factor` when `pattern`
# appears anywhere in the file path (case-sensitive substring).
# All matching rules are applied, penalties first, then bonuses.
boost:
  enabled: true

  # Factors below 1 push matching files down
  penalties:
    # Test files
    - {pattern: "/tests/", factor: 0.5}
    - {pattern: "/test/", factor: 0.5}
    - {pattern: "__tests__", factor: 0.5}
    - {pattern: "_test.", factor: 0.5}
    - {pattern: ".test.", factor: 0.5}
    - {pattern: ".spec.", factor: 0.5}
    - {pattern: "test_", factor: 0.5}
    # Mocks
    - {pattern: "/mocks/", factor: 0.4}
    - {pattern: "/mock/", factor: 0.4}
    - {pattern: ".mock.", factor: 0.4}
    # Fixtures and test data
    - {pattern: "/fixtures/", factor: 0.4}
    - {pattern: "/testdata/", factor: 0.4}
    # Generated code
    - {pattern: "/generated/", factor: 0.4}
    - {pattern: ".generated.", factor: 0.4}
    - {pattern: ".gen.", factor: 0.4}
    # Docs
    - {pattern: ".md", factor: 0.6}
    - {pattern: "/docs/", factor: 0.6}

  # Factors above 1 pull matching files up
  bonuses:
    - {pattern: "/src/", factor: 1.1}
    - {pattern: "/lib/", factor: 1.1}
    - {pattern: "/app/", factor: 1.1}
"""


def get_config_path() -> Path:
    """Get the path to config.yaml."""
    return get_data_path() / "config.yaml"


def load_yaml_config(path: Optional[Path] = None) -> dict:
    """
    Load configuration from ~/.pathboost/config.yaml.

    Args:
        path: Override config file location

    Returns:
        Configuration dictionary (empty if file doesn't exist)

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    config_path = path or get_config_path()
    if not config_path.exists():
        return {}

    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(
            "Failed to parse config file", {"path": str(config_path), "error": str(e)}
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Config file must contain a mapping",
            {"path": str(config_path), "type": type(data).__name__},
        )
    return data


def save_yaml_config(config: dict, path: Optional[Path] = None) -> bool:
    """
    Save configuration to ~/.pathboost/config.yaml.

    Args:
        config: Configuration dictionary to save
        path: Override config file location

    Returns:
        True if successful
    """
    config_path = path or get_config_path()

    try:
        if path is None:
            ensure_data_dir()
        else:
            config_path.parent.mkdir(parents=True, exist_ok=True)
        content = yaml.safe_dump(config, default_flow_style=False, sort_keys=False)
        config_path.write_text(content)
        return True
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to save config to {config_path}: {e}")
        return False


def create_default_config(path: Optional[Path] = None) -> bool:
    """
    Create default config.yaml if it doesn't exist.

    Returns:
        True if file was created, False if it already exists
    """
    config_path = path or get_config_path()
    if config_path.exists():
        return False

    if path is None:
        ensure_data_dir()
    else:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(DEFAULT_CONFIG_YAML)
    logger.info(f"Created default config at {config_path}")
    return True
