"""
Compounding configuration loading.

Provides utilities for loading and validating compounding parameters from
YAML files:

1. YAML configuration files (config/se3cov_base.yaml)
2. Pydantic validation models (common/param_models.py)

Usage:
    from se3cov.backend.config import load_compounding_config

    params = load_compounding_config("/path/to/config.yaml")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from se3cov.common.param_models import CompoundingParams

logger = logging.getLogger(__name__)

CONFIG_SECTION = "compounding"


def load_yaml_config(config_path: str | Path) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        config_path: Path to YAML file

    Returns:
        Dictionary with configuration values

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge multiple configuration dictionaries (later configs override earlier).

    Args:
        configs: Variable number of config dicts to merge

    Returns:
        Merged configuration dictionary
    """
    result: Dict[str, Any] = {}
    for config in configs:
        if config:
            _deep_merge(result, config)
    return result


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Deep merge override dict into base dict (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def load_compounding_config(
    base_path: Optional[str | Path] = None,
    preset_path: Optional[str | Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> CompoundingParams:
    """
    Load and validate compounding configuration from YAML files.

    Args:
        base_path: Path to base configuration YAML (se3cov_base.yaml)
        preset_path: Optional path to preset override YAML
        overrides: Optional dictionary of parameter overrides

    Returns:
        Validated CompoundingParams model

    Raises:
        ValidationError: If configuration is invalid
    """
    base_config: Dict[str, Any] = {}
    if base_path:
        base_config = load_yaml_config(base_path).get(CONFIG_SECTION, {})
        logger.debug("Loaded base compounding config from %s", base_path)

    preset_config: Dict[str, Any] = {}
    if preset_path:
        preset_config = load_yaml_config(preset_path).get(CONFIG_SECTION, {})
        logger.debug("Loaded compounding preset from %s", preset_path)

    # base <- preset <- overrides
    merged = merge_configs(base_config, preset_config, overrides or {})
    return CompoundingParams(**merged)


def get_default_config_path() -> Path:
    """
    Get default path to the base configuration file.

    The path is resolved against the source tree, so it exists only in a
    source or editable (pip install -e) checkout. A regular install copies
    the file to share/se3cov/config instead; pass base_path explicitly there.

    Returns:
        Path to config/se3cov_base.yaml next to the package
    """
    pkg_root = Path(__file__).parent.parent.parent
    return pkg_root / "config" / "se3cov_base.yaml"
