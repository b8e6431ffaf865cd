"""
Configuration loading with validation.

Reads the engine settings from YAML, checks them against the JSON Schema and
builds the pydantic EngineConfig. The loaded configuration is cached
process-wide and handed to solvers and process equations through
get_engine_config().
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jsonschema
import yaml
from pydantic import ValidationError

from hvac_engine.config.models import EngineConfig
from hvac_engine.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "HVAC_ENGINE_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent / "engine_defaults.yaml"
DEFAULT_SCHEMA_PATH = Path(__file__).parent / "schemas" / "engine_schema_v1.json"

_active_config: Optional[EngineConfig] = None


def _load_schema(schema_path: Path = DEFAULT_SCHEMA_PATH) -> Dict[str, Any]:
    """Load JSON schema from file."""
    try:
        with open(schema_path, 'r') as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not load schema from {schema_path}: {e}")


def config_from_dict(config_dict: Optional[Dict[str, Any]]) -> EngineConfig:
    """
    Validate a raw settings dictionary and build an EngineConfig.

    Args:
        config_dict: Parsed YAML content. None or empty means all defaults.

    Returns:
        EngineConfig instance.

    Raises:
        ConfigurationError: If schema or model validation fails.
    """
    config_dict = config_dict or {}
    try:
        jsonschema.validate(instance=config_dict, schema=_load_schema())
        logger.debug("JSON schema validation passed")
    except jsonschema.ValidationError as e:
        raise ConfigurationError(f"Schema validation failed: {e.message}")

    try:
        return EngineConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Failed to build EngineConfig: {e}")


def load_engine_config(config_path: Union[str, Path, None] = None) -> EngineConfig:
    """
    Load engine settings from a YAML file.

    Args:
        config_path: Path to YAML file. If None, tries the HVAC_ENGINE_CONFIG
            environment variable, then the packaged defaults.

    Returns:
        EngineConfig instance.

    Raises:
        ConfigurationError: If an explicitly given file is missing, cannot be
            parsed, or fails validation.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")
        paths_to_try = [path]
    else:
        paths_to_try = []
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            paths_to_try.append(Path(env_path))
        paths_to_try.append(DEFAULT_CONFIG_PATH)

    for path in paths_to_try:
        if path.exists():
            try:
                with open(path, 'r') as f:
                    config_dict = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Failed to parse YAML {path}: {e}")
            config = config_from_dict(config_dict)
            logger.info(f"Loaded engine configuration from {path}")
            return config

    logger.warning("Engine configuration file not found. Using hardcoded defaults.")
    return EngineConfig()


def get_engine_config() -> EngineConfig:
    """Return the active configuration, loading it on first use."""
    global _active_config
    if _active_config is None:
        _active_config = load_engine_config()
    return _active_config


def set_engine_config(config: EngineConfig) -> None:
    """Replace the active configuration for all subsequent calculations."""
    global _active_config
    if not isinstance(config, EngineConfig):
        raise ConfigurationError(f"Expected EngineConfig, got {type(config).__name__}")
    _active_config = config


def reset_engine_config() -> None:
    """Drop the cached configuration so the next access reloads it."""
    global _active_config
    _active_config = None
